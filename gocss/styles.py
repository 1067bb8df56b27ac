"""Style values and the handlers that validate them."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any, Callable

__all__ = [
    "UnitType",
    "Style",
    "StyleError",
    "StyleHandler",
    "STYLES_TABLE",
    "check_color",
    "background_color",
    "unsupported_style",
    "css_style",
]


class StyleError(ValueError):
    """Raised when a style is unknown or its value is invalid."""


class UnitType(enum.IntEnum):
    """Unit attached to a style value."""

    NONE = 0
    PIXELS = 1
    EM = 2
    REM = 3
    PERCENT = 4
    PT = 5
    AUTO = 6


@dataclass(frozen=True)
class Style:
    """A checked style value with its unit."""

    value: Any = None
    unit: UnitType = UnitType.NONE

    def __str__(self) -> str:
        return str(self.value)


StyleHandler = Callable[[str], Style]

_HEX_COLOR = re.compile(r"[0-9A-Fa-f]+")

_NAMED_COLORS = frozenset(
    {
        "black", "silver", "gray", "white", "maroon", "red", "purple",
        "fuchsia", "green", "lime", "olive", "yellow", "navy", "blue",
        "teal", "aqua", "orange", "aliceblue", "antiquewhite",
        "aquamarine", "azure", "beige", "bisque", "blanchedalmond",
        "blueviolet", "brown", "burlywood", "cadetblue", "chartreuse",
        "chocolate", "coral", "cornflowerblue", "cornsilk", "crimson",
        "cyan", "darkblue", "darkcyan", "darkgoldenrod", "darkgray",
        "darkgreen ", "darkgrey", "darkkhaki", "darkmagenta",
        "darkolivegreen", "darkorange", "darkorchid", "darkred",
        "darksalmon", "darkseagreen", "darkslateblue", "darkslategray",
        "darkslategrey", "darkturquoise", "darkviolet", "deeppink",
        "deepskyblue", "dimgray", "dimgrey", "dodgerblue", "firebrick",
        "floralwhite", "forestgreen", "gainsboro", "ghostwhite", "gold",
        "goldenrod", "greenyellow", "grey", "honeydew", "hotpink",
        "indianred", "indigo", "ivory", "khaki", "lavender",
        "lavnderblush", "lawgreen", "lemonchiffon", "lightblue",
        "lightcoral", "lightcyan", "lightgoldenrodyellow", "lightgray",
        "lightgreen", "lightgrey", "lightpink", "lightsalmon",
        "lightseagreen", "lightskyblue", "lightslategray",
        "lightslategrey", "lightsteelblue", "lightyellow", "limegreen",
        "linen", "magenta", "mediumaquamarine", "mediumblue",
        "mediumorchid", "mediumpurple", "mediumseagreen",
        "mediumslateblue", "mediumspringgreen", "mediumturquoise",
        "mediumvioletred", "midnightblue", "mintcream", "mistyrose",
        "moccasin", "navajowhite", "oldlace", "olivedrab", "orangered",
        "orchid", "palegoldenrod", "palegreen", "paleturquoise",
        "palevioletred", "papayawhip", "peachpuff", "peru", "pink",
        "plum", "powderblue", "rosybrown", "royalblue", "saddlebrown",
        "salmon", "sandybrown", "seagreen", "seashell", "sienna",
        "skyblue", "slateblue", "slategray", "slategrey", "snow",
        "springgreen", "steelblue", "tan", "thistle", "tomato",
        "turquoise", "violet", "wheat", "whitesmoke", "yellowgreen",
    }
)


def check_color(color: str) -> None:
    """Raise StyleError unless ``color`` is a hex color or a known color name."""
    if color.startswith("#"):
        digits = color[1:]
        if len(color) > 9 or not _HEX_COLOR.fullmatch(digits):
            raise StyleError("invalid color")
        return
    if color not in _NAMED_COLORS:
        raise StyleError("invalid color")


def background_color(value: str) -> Style:
    """Check a background color and wrap it in a Style."""
    check_color(value)
    return Style(value=value)


def unsupported_style(value: str) -> Style:
    """Handler for styles that have no checking yet; always raises."""
    raise StyleError("not implemented")


_STYLE_NAMES = (
    "background",
    "background-attachment",
    "background-color",
    "background-image",
    "background-position",
    "background-repeat",
    "border",
    "border-bottom",
    "border-bottom-color",
    "border-bottom-style",
    "border-bottom-width",
    "border-color",
    "border-left",
    "border-left-color",
    "border-left-style",
    "border-left-width",
    "border-right",
    "border-right-color",
    "border-right-style",
    "border-right-width",
    "border-style",
    "border-top",
    "border-top-color",
    "border-top-style",
    "border-top-width",
    "border-width",
    "clear",
    "clip",
    "color",
    "cursor",
    "display",
    "filter",
    "font",
    "font-family",
    "font-size",
    "font-variant",
    "font-weight",
    "height",
    "left",
    "letter-spacing",
    "line-height",
    "list-style",
    "list-style-image",
    "list-style-position",
    "list-style-type",
    "margin",
    "margin-bottom",
    "margin-left",
    "margin-right",
    "margin-top",
    "overflow",
    "padding",
    "padding-bottom",
    "padding-left",
    "padding-right",
    "padding-top",
    "page-break-after",
    "page-break-before",
    "position",
    "float",
    "text-align",
    "text-decoration",
    "text-decoration: blink",
    "text-decoration: line-through",
    "text-decoration: none",
    "text-decoration: overline",
    "text-decoration: underline",
    "text-indent",
    "text-transform",
    "top",
    "vertical-align",
    "visibility",
    "width",
    "z-index",
)

# Common CSS styles; entries may be replaced with custom handlers.
STYLES_TABLE: dict[str, StyleHandler] = {name: unsupported_style for name in _STYLE_NAMES}
STYLES_TABLE["background-color"] = background_color


def css_style(name: str, styles: dict[str, str]) -> Style:
    """Look up ``name`` in ``styles`` and return its checked Style."""
    value = styles.get(name, "")
    try:
        handler = STYLES_TABLE[name]
    except KeyError:
        raise StyleError("unknown style") from None
    return handler(value)