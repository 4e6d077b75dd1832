"""
String value helpers shared by the emitter.
"""


def is_empty(value: str | None) -> bool:
    """Return True for absent or empty string values."""
    return not value


def needs_cdata(value: str | None) -> bool:
    """
    Decide whether a value must be written as a CDATA section.

    Multi-line values (anything containing a newline character) keep their
    exact formatting inside CDATA; everything else is written as escaped text.

    Args:
        value: String value, or None when absent

    Returns:
        True if the value contains at least one newline character
    """
    return not is_empty(value) and "\n" in value
