"""
XML escaping for user-controlled text placed into the interview script.
"""

# Ampersand first, otherwise the entities produced below would be re-escaped.
_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_xml(value: str) -> str:
    """
    Escape the five XML special characters in a piece of text.

    Apply exactly once per value. Passing a non-string is a caller error and
    the resulting exception is left to propagate.
    """
    for raw, entity in _XML_ESCAPES:
        value = value.replace(raw, entity)
    return value
