"""printf-style substitution for localized templates.

Templates follow the Foundation format-string rules translators write against:
``%@`` for objects, ``%d``/``%ld`` for integers, ``%.2f`` for floats, and
positional specifiers such as ``%2$@``. Substitution is best-effort and never
raises: a specifier without a matching argument stays in the output as written.
"""

import re
from typing import Any, Sequence

_SPECIFIER = re.compile(
    r"%"
    r"(?:(?P<position>[1-9][0-9]*)\$)?"
    r"(?P<flags>[-+ #0']*)"
    r"(?P<width>[0-9]+)?"
    r"(?:\.(?P<precision>[0-9]*))?"
    r"(?P<length>hh|h|ll|l|q|L|z|t|j)?"
    r"(?P<conversion>[@sdiuxXofFeEgGcC%])"
)

# Foundation conversion -> Python %-operator conversion
_CONVERSIONS = {
    "@": "s",
    "s": "s",
    "d": "d",
    "i": "d",
    "u": "d",
    "x": "x",
    "X": "X",
    "o": "o",
    "f": "f",
    "F": "F",
    "e": "e",
    "E": "E",
    "g": "g",
    "G": "G",
    "c": "c",
    "C": "c",
}


def format_string(template: str, arguments: Sequence[Any]) -> str:
    """Substitute arguments into a printf-style template.

    Non-positional specifiers consume arguments in order; ``%n$`` specifiers
    pick the n-th argument (1-based). Length modifiers and the grouping flag
    are accepted and ignored.

    Args:
        template: Template with printf-style specifiers.
        arguments: Positional format arguments.

    Returns:
        The formatted string.
    """
    arguments = list(arguments)
    next_index = 0

    def substitute(match: re.Match) -> str:
        nonlocal next_index
        conversion = match.group("conversion")
        if conversion == "%":
            return "%"

        position = match.group("position")
        if position:
            index = int(position) - 1
        else:
            index = next_index
            next_index += 1

        if index >= len(arguments):
            return match.group(0)
        return _render(match, arguments[index])

    return _SPECIFIER.sub(substitute, template)


def _render(match: re.Match, value: Any) -> str:
    """Render one argument with the specifier's flags, width and precision."""
    # Booleans render as numbers, as NSNumber does
    if isinstance(value, bool):
        value = int(value)

    spec = "%" + match.group("flags").replace("'", "")
    if match.group("width"):
        spec += match.group("width")
    if match.group("precision") is not None:
        spec += "." + (match.group("precision") or "0")
    spec += _CONVERSIONS[match.group("conversion")]

    try:
        return spec % (value,)
    except (TypeError, ValueError, OverflowError):
        return str(value)
