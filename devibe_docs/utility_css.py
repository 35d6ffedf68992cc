"""
Utility CSS 產生 — 設計 token → CSS custom properties + 語意 utility class

區塊依序為：檔頭說明、:root 變數、顏色 / 字型 / 間距 utility、
響應式前綴、狀態前綴（hover、focus、active、disabled）。
"""

from .naming_engine import analyze_token_semantics
from .token_values import (
    color_value,
    format_css_name,
    format_number,
    hex_to_rgb,
    px_to_rem,
    spacing_value,
    token_label,
    typography_style,
)

BREAKPOINTS = (
    ("sm", "640px"),
    ("md", "768px"),
    ("lg", "1024px"),
    ("xl", "1280px"),
    ("2xl", "1536px"),
)

RESPONSIVE_LIMIT = 5
STATE_COLOR_LIMIT = 8
STATES = ("hover", "focus", "active", "disabled")

CSS_HEADER = """/**
 * AI-Optimized Design System Utilities
 * Generated from Figma Design System
 *
 * This CSS provides utility classes optimized for AI prototyping tools.
 * Classes use semantic naming and are self-documenting for AI comprehension.
 *
 * Usage Instructions:
 * - Include this CSS in your project's stylesheet
 * - Use utility classes directly in HTML or component templates
 * - All classes follow consistent naming conventions
 * - Responsive variants available with sm:, md:, lg:, xl: prefixes
 * - State variants available with hover:, focus:, active: prefixes
 *
 * Compatible with: Bolt, v0, Loveable, Cursor, and other AI tools
 */"""

FONT_WEIGHT_UTILITIES = [
    "/* Font Weight Utilities */",
    ".font-thin { font-weight: 100; }",
    ".font-light { font-weight: 300; }",
    ".font-normal { font-weight: 400; }",
    ".font-medium { font-weight: 500; }",
    ".font-semibold { font-weight: 600; }",
    ".font-bold { font-weight: 700; }",
    ".font-extrabold { font-weight: 800; }",
    ".font-black { font-weight: 900; }",
    "",
    "/* Text Alignment Utilities */",
    ".text-left { text-align: left; }",
    ".text-center { text-align: center; }",
    ".text-right { text-align: right; }",
    ".text-justify { text-align: justify; }",
    "",
]

# (class 前綴, 屬性)
SPACING_UTILITIES = (
    ("p", ("padding",)),
    ("px", ("padding-left", "padding-right")),
    ("py", ("padding-top", "padding-bottom")),
    ("pt", ("padding-top",)),
    ("pr", ("padding-right",)),
    ("pb", ("padding-bottom",)),
    ("pl", ("padding-left",)),
    ("m", ("margin",)),
    ("mx", ("margin-left", "margin-right")),
    ("my", ("margin-top", "margin-bottom")),
    ("mt", ("margin-top",)),
    ("mr", ("margin-right",)),
    ("mb", ("margin-bottom",)),
    ("ml", ("margin-left",)),
    ("gap", ("gap",)),
    ("gap-x", ("column-gap",)),
    ("gap-y", ("row-gap",)),
)


def _colors(tokens: list) -> list:
    return [t for t in tokens if t.type == "color" and color_value(t) is not None]


def _typography(tokens: list) -> list:
    return [t for t in tokens if t.type == "typography" and typography_style(t)]


def _spacing(tokens: list) -> list:
    return [t for t in tokens if t.type == "spacing" and spacing_value(t) is not None]


def _name(token) -> str:
    return format_css_name(token_label(token))


def generate_css_variables(tokens: list) -> str:
    lines = [":root {", "  /* Design System Colors */"]
    for token in _colors(tokens):
        name, value = _name(token), color_value(token)
        lines.append(f"  --color-{name}: {value};")
        rgb = hex_to_rgb(value)
        if rgb:
            lines.append(f"  --color-{name}-rgb: {rgb[0]}, {rgb[1]}, {rgb[2]};")

    lines += ["", "  /* Typography Variables */"]
    for token in _typography(tokens):
        name, style = _name(token), typography_style(token)
        if "fontFamily" in style:
            lines.append(f'  --font-{name}-family: "{style["fontFamily"]}";')
        if "fontSize" in style:
            lines.append(f"  --font-{name}-size: {format_number(style['fontSize'])}px;")
        if "fontWeight" in style:
            lines.append(f"  --font-{name}-weight: {format_number(style['fontWeight'])};")
        if "lineHeight" in style:
            lines.append(f"  --font-{name}-line-height: {format_number(style['lineHeight'])}px;")
        if style.get("letterSpacing"):
            lines.append(f"  --font-{name}-letter-spacing: {format_number(style['letterSpacing'])}px;")

    lines += ["", "  /* Spacing Variables */"]
    for token in _spacing(tokens):
        name, value = _name(token), spacing_value(token)
        lines.append(f"  --space-{name}: {format_number(value)}px;")
        lines.append(f"  --space-{name}-rem: {px_to_rem(value)}rem;")

    lines.append("}")
    return "\n".join(lines)


def generate_color_utilities(tokens: list) -> str:
    lines = [
        "/* Color Utilities - AI-Friendly and Semantic */",
        "/* Usage: Apply semantic color classes for consistent theming */",
        "",
    ]
    for token in _colors(tokens):
        name = _name(token)
        css_var = f"var(--color-{name})"
        role = token.semantic_role or "neutral"
        lines.append(f"/* Background: {token.description or token.name} */")
        lines.append(f".bg-{name} {{ background-color: {css_var}; }}")
        lines.append(f"/* Text: Use for {role} text elements */")
        lines.append(f".text-{name} {{ color: {css_var}; }}")
        lines.append(f"/* Border: Use for {role} borders and outlines */")
        lines.append(f".border-{name} {{ border-color: {css_var}; }}")
        lines.append(f"/* Fill: Use for {role} icons and graphics */")
        lines.append(f".fill-{name} {{ fill: {css_var}; }}")
        lines.append(f".stroke-{name} {{ stroke: {css_var}; }}")
        lines.append("")
    return "\n".join(lines)


def generate_typography_utilities(tokens: list) -> str:
    lines = [
        "/* Typography Utilities - Semantic and Hierarchical */",
        "/* Usage: Apply typography classes for consistent text styling */",
        "",
    ]
    for token in _typography(tokens):
        name, style = _name(token), typography_style(token)
        level = analyze_token_semantics(token).semantic_name
        lines.append(f"/* {level}: {token.description or token.name} */")

        props = []
        if "fontFamily" in style:
            props.append(f"font-family: var(--font-{name}-family)")
        if "fontSize" in style:
            props.append(f"font-size: var(--font-{name}-size)")
        if "fontWeight" in style:
            props.append(f"font-weight: var(--font-{name}-weight)")
        if "lineHeight" in style:
            props.append(f"line-height: var(--font-{name}-line-height)")
        if style.get("letterSpacing"):
            props.append(f"letter-spacing: var(--font-{name}-letter-spacing)")
        if "textTransform" in style:
            props.append(f"text-transform: {style['textTransform']}")

        lines.append(f".text-{name} {{")
        lines.append("  " + ";\n  ".join(props) + ";")
        lines.append("}")
        lines.append("")
    lines.extend(FONT_WEIGHT_UTILITIES)
    return "\n".join(lines)


def generate_spacing_utilities(tokens: list) -> str:
    lines = [
        "/* Spacing Utilities - Consistent and Scalable */",
        "/* Usage: Apply spacing classes for consistent layout rhythm */",
        "",
    ]
    for token in _spacing(tokens):
        name = _name(token)
        css_var = f"var(--space-{name})"
        lines.append(f"/* {token_label(token)}: {token.description or 'spacing token'} */")
        for prefix, properties in SPACING_UTILITIES:
            body = " ".join(f"{prop}: {css_var};" for prop in properties)
            lines.append(f".{prefix}-{name} {{ {body} }}")
        lines.append("")
    return "\n".join(lines)


def generate_responsive_utilities(tokens: list) -> str:
    colors = _colors(tokens)[:RESPONSIVE_LIMIT]
    typography = _typography(tokens)[:RESPONSIVE_LIMIT]
    spacing = _spacing(tokens)[:RESPONSIVE_LIMIT]
    lines = [
        "/* Responsive Utilities - Mobile-First Design */",
        "/* Usage: Apply responsive prefixes for adaptive layouts */",
        "",
    ]
    for prefix, min_width in BREAKPOINTS:
        lines.append(f"@media (min-width: {min_width}) {{")
        for token in colors:
            name = _name(token)
            lines.append(f"  .{prefix}\\:bg-{name} {{ background-color: var(--color-{name}); }}")
            lines.append(f"  .{prefix}\\:text-{name} {{ color: var(--color-{name}); }}")
        for token in typography:
            name = _name(token)
            lines.append(f"  .{prefix}\\:text-{name} {{ font-size: var(--font-{name}-size); }}")
        for token in spacing:
            name = _name(token)
            lines.append(f"  .{prefix}\\:p-{name} {{ padding: var(--space-{name}); }}")
            lines.append(f"  .{prefix}\\:m-{name} {{ margin: var(--space-{name}); }}")
        lines.append("}")
        lines.append("")
    return "\n".join(lines)


def generate_state_utilities(tokens: list) -> str:
    colors = _colors(tokens)[:STATE_COLOR_LIMIT]
    lines = [
        "/* Interactive State Utilities - Hover, Focus, Active */",
        "/* Usage: Apply state prefixes for interactive elements */",
        "",
    ]
    for state in STATES:
        lines.append(f"/* {state.capitalize()} State Utilities */")
        for token in colors:
            name = _name(token)
            css_var = f"var(--color-{name})"
            if state == "disabled":
                lines.append(f".disabled\\:bg-{name}:disabled {{ background-color: {css_var}; opacity: 0.5; }}")
                lines.append(f".disabled\\:text-{name}:disabled {{ color: {css_var}; opacity: 0.7; }}")
            else:
                lines.append(f".{state}\\:bg-{name}:{state} {{ background-color: {css_var}; }}")
                lines.append(f".{state}\\:text-{name}:{state} {{ color: {css_var}; }}")
                lines.append(f".{state}\\:border-{name}:{state} {{ border-color: {css_var}; }}")
        lines.append("")

    lines.append("/* Accessibility Focus Utilities */")
    lines.append(".focus\\:outline-none:focus { outline: none; }")
    lines.append(".focus\\:ring-2:focus { box-shadow: 0 0 0 2px rgba(59, 130, 246, 0.5); }")
    lines.append(".focus\\:ring-primary:focus { box-shadow: 0 0 0 2px var(--color-brand-primary); }")
    lines.append("")
    return "\n".join(lines)


def generate_utility_css(tokens: list) -> str:
    """完整 utility CSS；各區塊以空行分隔."""
    blocks = [
        CSS_HEADER,
        generate_css_variables(tokens),
        generate_color_utilities(tokens),
        generate_typography_utilities(tokens),
        generate_spacing_utilities(tokens),
        generate_responsive_utilities(tokens),
        generate_state_utilities(tokens),
    ]
    return "\n\n".join(blocks)
