"""
Style token canonicalisation for text runs.

Style equality between runs is plain value equality, so colours that reach
the engine in different notations ("rgb(0, 0, 0)", "#000", (0, 0, 0)) are
folded into one lowercase ``#rrggbb`` token before comparison.
"""

import re
from functools import lru_cache
from typing import Any, Optional

RGB_PATTERN = re.compile(r"^\s*rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)\s*$", re.IGNORECASE)
HEX_PATTERN = re.compile(r"^\s*#([0-9a-f]{3}|[0-9a-f]{6})\s*$", re.IGNORECASE)


def convert_color_to_rgb(color_info) -> str:
    """
    Convert numeric colour components to a CSS rgb() string.
    Handles gray (1 component), RGB (3) and CMYK (4), each in 0..1.
    """
    if color_info is None:
        return "rgb(0, 0, 0)"

    try:
        if isinstance(color_info, (list, tuple)):
            if len(color_info) == 1:
                gray = float(color_info[0])
                rgb_val = int(gray * 255)
                return f"rgb({rgb_val}, {rgb_val}, {rgb_val})"
            elif len(color_info) == 3:
                r, g, b = [int(float(c) * 255) for c in color_info]
                return f"rgb({r}, {g}, {b})"
            elif len(color_info) == 4:
                # Simplified CMYK conversion
                c, m, y, k = [float(x) for x in color_info]
                r = int(255 * (1 - c) * (1 - k))
                g = int(255 * (1 - m) * (1 - k))
                b = int(255 * (1 - y) * (1 - k))
                return f"rgb({r}, {g}, {b})"

        if isinstance(color_info, (int, float)):
            rgb_val = int(float(color_info) * 255)
            return f"rgb({rgb_val}, {rgb_val}, {rgb_val})"

    except (ValueError, TypeError):
        pass

    return "rgb(0, 0, 0)"


def convert_rgb_to_hex(rgb_str: str) -> str:
    """
    Convert a CSS rgb() string to hex colour.
    Example: "rgb(255, 0, 128)" -> "#ff0080"
    """
    match = RGB_PATTERN.match(rgb_str)
    if not match:
        return "#000000"
    r, g, b = (min(255, int(match.group(i))) for i in range(1, 4))
    return "#{:02x}{:02x}{:02x}".format(r, g, b)


@lru_cache(maxsize=256)
def _canonical_string_token(token: str) -> str:
    if RGB_PATTERN.match(token):
        return convert_rgb_to_hex(token)

    hex_match = HEX_PATTERN.match(token)
    if hex_match:
        digits = hex_match.group(1).lower()
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return f"#{digits}"

    return token


def _is_unit_components(components) -> bool:
    """Gray, RGB or CMYK components, each a finite number in 0..1"""
    if len(components) not in (1, 3, 4):
        return False
    for component in components:
        if isinstance(component, bool) or not isinstance(component, (int, float)):
            return False
        if not 0.0 <= component <= 1.0:
            return False
    return True


def canonical_color_token(color: Any) -> Optional[str]:
    """Fold a colour into a comparable token.

    Strings in rgb() or hex notation and well-formed component tuples
    (1, 3 or 4 values in 0..1) become ``#rrggbb``. Anything else, such as
    named colours, rgba(), pattern ids or 0..255 tuples, is kept as a
    distinct verbatim token. ``None`` stays ``None``.
    """
    if color is None:
        return None
    if isinstance(color, str):
        return _canonical_string_token(color)
    if isinstance(color, (int, float)) and not isinstance(color, bool):
        color = (color,)
    if isinstance(color, (list, tuple)):
        components = tuple(color)
        if _is_unit_components(components):
            return convert_rgb_to_hex(convert_color_to_rgb(components))
        return str(components)
    return str(color)
