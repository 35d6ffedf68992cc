"""
Tailwind 設定產生 — 設計 token → tailwind.config.js

顏色依 semantic role 分組成 50–950 色階，字型與間距轉成 rem，
其餘（圓角、陰影、動畫、斷點）為固定預設值。
"""

import json
import math
import re

from .naming_engine import analyze_token_semantics
from .token_values import (
    color_value,
    darken_color,
    format_css_name,
    format_number,
    lighten_color,
    lightness,
    px_to_rem,
    scale_color,
    spacing_value,
    token_label,
    typography_style,
)

COLOR_STEPS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

# 單一顏色的色階：step → (lighten | darken, amount)
_SINGLE_COLOR_SCALE = (
    (50, lighten_color, 0.95),
    (100, lighten_color, 0.9),
    (200, lighten_color, 0.8),
    (300, lighten_color, 0.6),
    (400, lighten_color, 0.4),
    (500, None, 0),
    (600, darken_color, 0.1),
    (700, darken_color, 0.2),
    (800, darken_color, 0.3),
    (900, darken_color, 0.4),
    (950, darken_color, 0.5),
)

CONTENT_GLOBS = [
    "./src/**/*.{js,ts,jsx,tsx,html}",
    "./pages/**/*.{js,ts,jsx,tsx}",
    "./components/**/*.{js,ts,jsx,tsx}",
    "./app/**/*.{js,ts,jsx,tsx}",
    "./public/**/*.html",
]

COMMON_SPACING = (
    ("0", 0), ("px", 1), ("0.5", 2), ("1", 4), ("1.5", 6), ("2", 8), ("2.5", 10),
    ("3", 12), ("4", 16), ("5", 20), ("6", 24), ("8", 32), ("10", 40), ("12", 48),
    ("16", 64), ("20", 80), ("24", 96), ("32", 128), ("40", 160), ("48", 192),
    ("56", 224), ("64", 256),
)

BORDER_RADIUS = {
    "none": "0px",
    "sm": "0.125rem",
    "DEFAULT": "0.25rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "2xl": "1rem",
    "3xl": "1.5rem",
    "full": "9999px",
}

BOX_SHADOW = {
    "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "DEFAULT": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    "2xl": "0 25px 50px -12px rgb(0 0 0 / 0.25)",
    "inner": "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)",
    "none": "none",
}

ANIMATION = {
    "fade-in": "fadeIn 0.5s ease-in-out",
    "fade-out": "fadeOut 0.5s ease-in-out",
    "slide-up": "slideUp 0.3s ease-out",
    "slide-down": "slideDown 0.3s ease-out",
    "scale-up": "scaleUp 0.2s ease-out",
    "scale-down": "scaleDown 0.2s ease-out",
}

SCREENS = {
    "xs": "475px",
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
}

PLUGINS = ["@tailwindcss/forms", "@tailwindcss/typography", "@tailwindcss/aspect-ratio"]

FONT_WEIGHT_NAMES = {
    100: "thin",
    200: "extralight",
    300: "light",
    400: "normal",
    500: "medium",
    600: "semibold",
    700: "bold",
    800: "extrabold",
    900: "black",
}

CONFIG_HEADER = """/**
 * Tailwind CSS Configuration
 * Generated from Figma Design System
 *
 * This configuration extends Tailwind CSS with your design system tokens.
 * Use this file in your tailwind.config.js to apply your design system.
 *
 * Installation:
 * 1. Copy this configuration to your tailwind.config.js file
 * 2. Install recommended plugins: npm install @tailwindcss/forms @tailwindcss/typography @tailwindcss/aspect-ratio
 * 3. Use the extended classes in your components
 *
 * Compatible with: Tailwind CSS v3.0+
 * AI Tool Compatibility: Optimized for Bolt, v0, Loveable, and other AI prototyping tools
 */

/** @type {import('tailwindcss').Config} */
module.exports = """


def _spacing_name(name: str) -> str:
    return format_css_name(re.sub(r"^space-", "", name.lower()))


def line_height_name(ratio: float) -> str:
    if ratio <= 1.0:
        return "none"
    if ratio <= 1.25:
        return "tight"
    if ratio <= 1.375:
        return "snug"
    if ratio <= 1.5:
        return "normal"
    if ratio <= 1.625:
        return "relaxed"
    return "loose"


def letter_spacing_name(spacing: float) -> str:
    if spacing < 0:
        return "tighter"
    if spacing == 0:
        return "normal"
    if spacing <= 0.5:
        return "tight"
    if spacing <= 1:
        return "wide"
    return "wider"


def color_scale(colors: list) -> dict:
    """
    同一 role 的顏色 → 色階 dict（鍵為字串 step）。

    單色：以 lighten / darken 展開；多色：依亮度排序後分配 step，
    缺少的 step 由第一個顏色乘上遞減亮度補上。
    """
    if len(colors) == 1:
        base = color_value(colors[0])
        scale = {}
        for step, adjust, amount in _SINGLE_COLOR_SCALE:
            scale[str(step)] = base if adjust is None else adjust(base, amount)
        scale["DEFAULT"] = base
        return scale

    ordered = sorted(colors, key=lambda t: lightness(color_value(t)))
    assigned = {}
    for index, token in enumerate(ordered):
        step = COLOR_STEPS[math.floor(index / len(ordered) * len(COLOR_STEPS))]
        assigned[step] = color_value(token)

    first = color_value(ordered[0])
    scale = {}
    for index, step in enumerate(COLOR_STEPS):
        if step in assigned:
            scale[str(step)] = assigned[step]
        else:
            scale[str(step)] = scale_color(first, 1 - index / 10)
    return scale


def build_color_config(tokens: list) -> dict:
    groups: dict = {}
    for token in tokens:
        if token.type != "color" or color_value(token) is None:
            continue
        groups.setdefault(token.semantic_role or "neutral", []).append(token)

    config = {}
    for role, colors in groups.items():
        if len(colors) == 1:
            config[format_css_name(token_label(colors[0]))] = color_scale(colors)
        else:
            config[role] = color_scale(colors)
    return config


def build_typography_config(tokens: list) -> dict:
    """回傳 fontFamily / fontSize / fontWeight / lineHeight / letterSpacing 五組設定."""
    families, sizes, weights, line_heights, letter_spacing = {}, {}, {}, {}, {}
    heading_family = body_family = None

    for token in tokens:
        if token.type != "typography":
            continue
        style = typography_style(token)
        family = style.get("fontFamily")
        size = style.get("fontSize")

        if family:
            families.setdefault(format_css_name(family), [family, "sans-serif"])
            level = analyze_token_semantics(token).semantic_name
            if "heading" in level and heading_family is None:
                heading_family = family
            if "body" in level and body_family is None:
                body_family = family

        if isinstance(size, (int, float)) and size > 0:
            extra = {}
            if style.get("lineHeight"):
                extra["lineHeight"] = f"{px_to_rem(style['lineHeight'])}rem"
            if style.get("letterSpacing"):
                extra["letterSpacing"] = f"{format_number(style['letterSpacing'])}px"
            sizes[format_css_name(token_label(token))] = [f"{px_to_rem(size)}rem", extra]

            line_height = style.get("lineHeight")
            if line_height:
                ratio = line_height / size
                line_heights.setdefault(line_height_name(ratio), f"{ratio:.2f}")

        weight = style.get("fontWeight")
        if isinstance(weight, int) and weight not in weights.values():
            weights[FONT_WEIGHT_NAMES.get(weight, str(weight))] = weight

        spacing = style.get("letterSpacing")
        if spacing:
            letter_spacing.setdefault(letter_spacing_name(spacing), f"{format_number(spacing)}px")

    if heading_family:
        families["heading"] = [heading_family, "sans-serif"]
    if body_family:
        families["body"] = [body_family, "sans-serif"]

    return {
        "fontFamily": families,
        "fontSize": sizes,
        "fontWeight": weights,
        "lineHeight": line_heights,
        "letterSpacing": letter_spacing,
    }


def build_spacing_config(tokens: list) -> dict:
    config = {}
    for token in tokens:
        if token.type != "spacing":
            continue
        value = spacing_value(token)
        if value is None:
            continue
        config[_spacing_name(token_label(token))] = f"{px_to_rem(value)}rem"
    for name, px in COMMON_SPACING:
        config.setdefault(name, f"{px_to_rem(px)}rem")
    return config


def build_tailwind_config(tokens: list) -> dict:
    typography = build_typography_config(tokens)
    return {
        "content": list(CONTENT_GLOBS),
        "theme": {
            "extend": {
                "colors": build_color_config(tokens),
                **typography,
                "spacing": build_spacing_config(tokens),
                "borderRadius": dict(BORDER_RADIUS),
                "boxShadow": dict(BOX_SHADOW),
                "animation": dict(ANIMATION),
                "screens": dict(SCREENS),
            }
        },
        "plugins": list(PLUGINS),
    }


def generate_tailwind_config(tokens: list) -> str:
    body = json.dumps(build_tailwind_config(tokens), indent=2, ensure_ascii=False)
    return CONFIG_HEADER + body + "\n"
