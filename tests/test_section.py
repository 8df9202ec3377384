"""Unit tests for section accumulation and resolution."""

from __future__ import annotations

import typing as typ

from markupsafe import Markup

from nice_partials.content import Deferred, Forwarded, Literal, RenderableUnit
from nice_partials.section import Section

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from nice_partials import Partial, ViewContext

    PartialFactory = cabc.Callable[..., Partial]


class Counter:
    """Renderable recording how often it was rendered."""

    def __init__(self) -> None:
        self.calls = 0

    def render_in(self, view: ViewContext) -> str:
        self.calls += 1
        return f"render {self.calls}"


def test_units_are_classified_on_write(view: ViewContext) -> None:
    """Each kind of content becomes the matching unit."""
    source = Section("source", view)
    source("snap")
    section = Section("body", view)
    counter = Counter()

    section("text", counter, lambda view: "deferred", source, 42)

    kinds = [type(unit) for unit in section.units]
    assert kinds == [Literal, RenderableUnit, Deferred, Forwarded, Literal], (
        f"unexpected unit kinds {kinds!r}"
    )
    assert counter.calls == 0, "renderables must not render on write"


def test_empty_and_none_writes_are_no_ops(view: ViewContext) -> None:
    """Writing nothing visible stores no unit and keeps the section absent."""
    section = Section("body", view)
    section("", None)
    section(Section("other", view))

    assert section.units == ()
    assert not section.is_present()


def test_resolution_follows_append_order(view: ViewContext) -> None:
    """Units resolve in order with nothing skipped or reordered."""
    section = Section("body", view)
    for index in range(5):
        section(f"{index}")
        section(lambda view, index=index: f"[{index}]")

    assert str(section) == "0[0]1[1]2[2]3[3]4[4]"


def test_closures_run_once_per_resolve(view: ViewContext) -> None:
    """No caching: each resolve evaluates deferred content again."""
    counter = Counter()
    calls: list[object] = []
    section = Section("body", view)
    section(counter)
    section(lambda context: calls.append(context) or "")

    first = section.resolve()
    second = section.resolve()

    assert (first, second) == ("render 1", "render 2")
    assert calls == [view, view], "deferred closures receive the view each time"


def test_units_written_while_resolving_wait_for_the_next_call(
    view: ViewContext,
) -> None:
    """A closure writing to its own section does not extend the current pass."""
    calls: list[object] = []
    section = Section("body", view)
    section("a")

    def _write_more(context: ViewContext) -> str:
        calls.append(context)
        section("x")
        return ""

    section(_write_more)

    assert str(section) == "a", "units appended mid-resolve must not render now"
    assert len(calls) == 1
    assert len(section.units) == 3
    assert str(section) == "ax"
    assert len(calls) == 2, "the closure runs exactly once per resolve"


def test_resolve_accepts_an_explicit_view(view: ViewContext) -> None:
    """A view passed to resolve replaces the ambient one."""
    section = Section("body", view)
    section(lambda context: context)

    assert section.resolve("other view") == "other view"


def test_plain_text_is_escaped_and_markup_is_kept(view: ViewContext) -> None:
    """Plain strings are escaped on resolution; Markup passes through."""
    section = Section("body", view)
    section("<b>", Markup("<i>ok</i>"))

    assert str(section) == "&lt;b&gt;<i>ok</i>"


def test_fallback_only_applies_without_units(view: ViewContext) -> None:
    """The local fallback is ignored once any unit was appended."""
    section = Section("title", view, fallback="Local")
    assert section.is_present()
    assert str(section) == "Local"

    section("Explicit")
    assert str(section) == "Explicit"


def test_empty_fallback_is_absent(view: ViewContext) -> None:
    """An empty local value does not make a section present."""
    assert not Section("title", view, fallback="").is_present()
    assert not Section("title", view).is_present()


def test_deferred_content_counts_as_present(view: ViewContext) -> None:
    """Presence does not evaluate closures."""
    calls: list[object] = []
    section = Section("body", view)
    section(lambda context: calls.append(context))

    assert section.is_present()
    assert calls == []


def test_snapshot_is_independent_of_later_writes(
    new_partial: PartialFactory,
) -> None:
    """Neither side of a direct pass sees the other's later writes."""
    source, target = new_partial(), new_partial()
    source.title("one")
    target.title(source.title)

    source.title(" two")
    target.title(" three")

    assert str(source.title) == "one two"
    assert str(target.title) == "one three"


def test_attributes_accumulate_on_write(view: ViewContext) -> None:
    """Later writes update stored options key by key."""
    section = Section("title", view)
    section("a", class_="first", data_id="7")
    section(class_="second")

    assert dict(section.options) == {"class": "second", "data-id": "7"}
    assert str(section) == "a"


def test_calling_without_arguments_returns_section(view: ViewContext) -> None:
    """A bare call reads instead of writing."""
    section = Section("title", view)
    assert section() is section


def test_pending_blocks_wait_for_yield(view: ViewContext) -> None:
    """Pending blocks contribute nothing until yielded."""
    section = Section("body", view)
    section.pending(lambda first, second: f"{first}+{second}")

    assert section.is_present()
    assert str(section) == ""
    assert section.yield_("a", "b") is section
    assert str(section) == "a+b"
    section.yield_("c", "d")
    assert str(section) == "a+bc+d", "pending blocks stay registered"


def test_markdown_helper_appends_html(view: ViewContext) -> None:
    """View helpers called on a section append their output."""
    section = Section("body", view)
    section.markdown("**bold**")

    assert str(section) == "<p><strong>bold</strong></p>"
