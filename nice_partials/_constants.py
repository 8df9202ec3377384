"""Common literal values used across nice_partials.

These constants keep template variable names and attribute keys centralized so
the view, the tag builder, and tests can import the same values without
drifting. Intended for internal use within the nice_partials package.

Examples
--------
>>> from nice_partials import _constants
>>> _constants.PARTIAL_VARIABLE
'partial'
>>> _constants.DEFAULT_OUTPUT_TEMPLATE.format(key="home")
'home.html'
"""

CLASS_ATTRIBUTE = "class"
PARTIAL_VARIABLE = "partial"
VIEW_VARIABLE = "view"
DEFAULT_OUTPUT_TEMPLATE = "{key}.html"
