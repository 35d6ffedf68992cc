"""Token 值的讀取與轉換（hex / rem / 字型屬性），供 tailwind 與 CSS 輸出共用."""

import re
from typing import Optional

BASE_FONT_SIZE = 16

_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.I)

# typography token 值（dict）中會用到的欄位：名稱 → 型別
TYPOGRAPHY_FIELDS = {
    "fontFamily": str,
    "fontSize": (int, float),
    "fontWeight": (int, float),
    "lineHeight": (int, float),
    "letterSpacing": (int, float),
    "textTransform": str,
}


def format_number(value) -> str:
    """1.0 → '1'、0.25 → '0.25'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def px_to_rem(px: float, base: float = BASE_FONT_SIZE) -> str:
    return format_number(px / base)


def format_css_name(name: str) -> str:
    name = re.sub(r"[^a-z0-9\-]", "-", name.lower())
    name = re.sub(r"-+", "-", name)
    return re.sub(r"^-|-$", "", name)


def token_label(token) -> str:
    return token.semantic_name or token.name


def color_value(token) -> Optional[str]:
    value = token.value
    if isinstance(value, dict):
        value = value.get("hex")
    return value if isinstance(value, str) and value else None


def hex_to_rgb(value: str) -> Optional[tuple]:
    match = _HEX_RE.match(value or "")
    if not match:
        return None
    return tuple(int(part, 16) for part in match.groups())


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def _round(x: float) -> int:
    return int(x + 0.5)


def lighten_color(value: str, amount: float) -> str:
    rgb = hex_to_rgb(value)
    if rgb is None:
        return value
    return rgb_to_hex(*(_round(c + (255 - c) * amount) for c in rgb))


def scale_color(value: str, factor: float) -> str:
    rgb = hex_to_rgb(value)
    if rgb is None:
        return value
    return rgb_to_hex(*(_round(c * factor) for c in rgb))


def darken_color(value: str, amount: float) -> str:
    return scale_color(value, 1 - amount)


def lightness(value: str) -> float:
    """HSL lightness 0–1；無法解析時為 0."""
    rgb = hex_to_rgb(value)
    if rgb is None:
        return 0.0
    return (max(rgb) + min(rgb)) / 2 / 255


def spacing_value(token) -> Optional[float]:
    value = token.value
    if isinstance(value, dict):
        value = value.get("value")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def typography_style(token) -> dict:
    value = token.value
    if isinstance(value, bool):
        return {}
    if isinstance(value, (int, float)):
        return {"fontSize": value}
    if not isinstance(value, dict):
        return {}
    style = {}
    for key, kind in TYPOGRAPHY_FIELDS.items():
        field = value.get(key)
        if isinstance(field, bool) or not isinstance(field, kind) or field == "":
            continue
        style[key] = field
    return style
