"""
命名引擎 — 將設計 token 轉成 AI 工具慣用的命名

每個 AI 工具一組固定預設（前綴 + 大小寫慣例 + 是否優先語意名稱），
另提供語意對應分析與命名指南。
"""

import dataclasses
import re
from typing import Optional

from .models import DesignToken, NamingPattern, SemanticMapping

NAMING_PRESETS = {
    "bolt": NamingPattern(
        color_prefix="color-", spacing_prefix="space-", text_prefix="text-",
        convention="kebab-case", semantic_priority=True,
    ),
    "v0": NamingPattern(
        color_prefix="", spacing_prefix="", text_prefix="text-",
        convention="kebab-case", semantic_priority=True,
    ),
    "loveable": NamingPattern(
        color_prefix="clr-", spacing_prefix="spacing-", text_prefix="typography-",
        convention="kebab-case", semantic_priority=True,
    ),
    "cursor": NamingPattern(
        color_prefix="", spacing_prefix="", text_prefix="",
        convention="camelCase", semantic_priority=False,
    ),
    "figmaMake": NamingPattern(
        color_prefix="color-", spacing_prefix="space-", text_prefix="type-",
        convention="kebab-case", semantic_priority=True,
    ),
}

_TOOL_ALIASES = {"figma-make": "figmaMake"}


def _rule(pattern: str, semantic: str, confidence: float, description: str) -> tuple:
    return (re.compile(pattern), semantic, confidence, description)


# 有序規則：先符合者勝出（例如 primary 要在 brand 類之前）
SEMANTIC_PATTERNS = {
    "color": [
        _rule(r"(primary|main|brand)", "primary", 0.9, "Primary brand color detected"),
        _rule(r"(secondary|accent)", "secondary", 0.9, "Secondary brand color detected"),
        _rule(r"(success|positive|good|green)", "success", 0.9, "Success state color detected"),
        _rule(r"(error|danger|negative|bad|red)", "error", 0.9, "Error state color detected"),
        _rule(r"(warning|caution|alert|yellow|orange)", "warning", 0.9, "Warning state color detected"),
        _rule(r"(info|information|neutral|blue|cyan)", "info", 0.8, "Info state color detected"),
        _rule(r"(gray|grey|neutral|slate|zinc)", "neutral", 0.8, "Neutral color detected"),
        _rule(r"(text|foreground)", "text", 0.7, "Text color detected"),
        _rule(r"(background|bg|surface)", "background", 0.7, "Background color detected"),
        _rule(r"(border|outline|stroke)", "border", 0.7, "Border color detected"),
    ],
    "typography": [
        _rule(r"(display|hero|banner)", "display", 0.9, "Display typography detected"),
        _rule(r"(h1|heading-xl|title-xl)", "heading-xl", 0.9, "Extra large heading detected"),
        _rule(r"(h2|heading-lg|title-lg)", "heading-lg", 0.9, "Large heading detected"),
        _rule(r"(h3|heading-md|title-md)", "heading-md", 0.9, "Medium heading detected"),
        _rule(r"(h4|h5|h6|heading-sm|title-sm)", "heading-sm", 0.9, "Small heading detected"),
        _rule(r"(body|text|paragraph)", "body", 0.8, "Body text detected"),
        _rule(r"(caption|small|fine|micro)", "caption", 0.8, "Caption text detected"),
        _rule(r"(button|btn|cta)", "button", 0.8, "Button text detected"),
        _rule(r"(label|form)", "label", 0.7, "Label text detected"),
    ],
    "spacing": [
        _rule(r"(xs|extra-small|tiny)", "xs", 0.9, "Extra small spacing detected"),
        _rule(r"(sm|small)", "sm", 0.9, "Small spacing detected"),
        _rule(r"(md|medium|base)", "md", 0.9, "Medium spacing detected"),
        _rule(r"(lg|large)", "lg", 0.9, "Large spacing detected"),
        _rule(r"(xl|extra-large|huge)", "xl", 0.9, "Extra large spacing detected"),
        _rule(r"(padding|pad)", "padding", 0.8, "Padding spacing detected"),
        _rule(r"(margin|gap)", "margin", 0.8, "Margin spacing detected"),
        _rule(r"(section|block)", "section", 0.7, "Section spacing detected"),
        _rule(r"(component|element)", "component", 0.7, "Component spacing detected"),
    ],
}

_INTENSITY_RE = re.compile(r"(\d+)|(light|dark|bright|deep|pale|vivid)")


def resolve_preset(tool: str, presets: Optional[dict] = None) -> tuple:
    """回傳 (正規化工具名稱, NamingPattern)；未知工具拋 ValueError."""
    presets = presets or NAMING_PRESETS
    key = _TOOL_ALIASES.get(tool, tool) if isinstance(tool, str) else None
    pattern = presets.get(key) if key is not None else None
    if pattern is None:
        known = ", ".join(presets)
        raise ValueError(f"Unsupported AI tool: {tool} (known: {known})")
    return key, pattern


def clean_name(name: str) -> str:
    name = name.lower()
    name = re.sub(r"[^a-z0-9\s\-_]", "", name)
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"[-_]+", "-", name)
    return re.sub(r"^[-_]|[-_]$", "", name)


def apply_naming_convention(name: str, convention: str) -> str:
    if convention == "kebab-case":
        return re.sub(r"[_\s]+", "-", name.lower())
    if convention == "camelCase":
        return re.sub(r"[-_\s]+(.)", lambda m: m.group(1).upper(), name)
    if convention == "PascalCase":
        camel = re.sub(r"[-_\s]+(.)", lambda m: m.group(1).upper(), name)
        return camel[:1].upper() + camel[1:]
    if convention == "snake_case":
        return re.sub(r"[-\s]+", "_", name.lower())
    return name


def extract_intensity(name: str) -> str:
    match = _INTENSITY_RE.search(name)
    if match:
        return match.group(0)
    return "base"


class NamingFormatter:
    """依 AI 工具預設改寫 token 名稱."""

    def __init__(self, presets: Optional[dict] = None):
        self.presets = presets or NAMING_PRESETS

    def format_for_tool(self, tokens: list, tool: str) -> dict:
        """回傳 {"tokens": [...], "namingGuide": str}；輸入 token 不會被修改."""
        key, pattern = resolve_preset(tool, self.presets)
        formatted = [self.format_token(token, pattern) for token in tokens]
        return {"tokens": formatted, "namingGuide": generate_naming_guide(key, pattern)}

    def format_token(self, token: DesignToken, pattern: NamingPattern) -> DesignToken:
        prefix = self._get_prefix(token.type, pattern)
        if pattern.semantic_priority and token.semantic_name:
            base_name = token.semantic_name
        else:
            base_name = token.name
        base_name = apply_naming_convention(clean_name(base_name), pattern.convention)
        formatted = prefix + base_name
        return dataclasses.replace(token, name=formatted, semantic_name=formatted)

    def _get_prefix(self, token_type: str, pattern: NamingPattern) -> str:
        if token_type == "color":
            return pattern.color_prefix
        if token_type == "spacing":
            return pattern.spacing_prefix
        if token_type == "typography":
            return pattern.text_prefix
        return ""


def analyze_token_semantics(token: DesignToken) -> SemanticMapping:
    original = token.name.lower()
    semantic_name = original
    confidence = 0.5
    reasoning = "Basic name analysis"

    for pattern, semantic, score, description in SEMANTIC_PATTERNS.get(token.type, []):
        if pattern.search(original):
            semantic_name = semantic
            confidence = score
            reasoning = description
            break

    role = token.semantic_role if token.type == "color" else None
    if role and role != "neutral":
        semantic_name = f"{role}-{extract_intensity(original)}"
        confidence = max(confidence, 0.8)
        reasoning = f"Detected semantic role: {role}"

    return SemanticMapping(
        original_name=token.name,
        semantic_name=semantic_name,
        confidence=confidence,
        reasoning=reasoning,
    )


def generate_semantic_mappings(tokens: list) -> list:
    return [analyze_token_semantics(t) for t in tokens]


def generate_naming_guide(tool: str, pattern: NamingPattern) -> str:
    """命名指南（純文字樣板）."""
    color, text, space = pattern.color_prefix, pattern.text_prefix, pattern.spacing_prefix
    guide = [
        f"# Naming Guide for {tool[:1].upper() + tool[1:]}",
        "",
        "This guide explains the naming conventions used in your design system tokens,",
        f"optimized for {tool} and similar AI prototyping tools.",
        "",
        "## Naming Convention",
        f"**Format:** {pattern.convention}",
        f"**Semantic Priority:** {'Enabled' if pattern.semantic_priority else 'Disabled'}",
        "",
        "## Prefixes",
        f"- **Colors:** `{color}`",
        f"- **Spacing:** `{space}`",
        f"- **Typography:** `{text}`",
        "",
        "## Examples",
        "",
        "### Color Tokens",
        f"- Primary brand color: `{color}brand-primary`",
        f"- Success state: `{color}semantic-success`",
        f"- Neutral text: `{color}text-primary`",
        "",
        "### Typography Tokens",
        f"- Large heading: `{text}heading-lg`",
        f"- Body text: `{text}body-md`",
        f"- Button text: `{text}button`",
        "",
        "### Spacing Tokens",
        f"- Small spacing: `{space}sm`",
        f"- Component padding: `{space}component-padding`",
        f"- Section margin: `{space}section-margin`",
        "",
        "## Usage in AI Tools",
        "",
        "When working with AI prototyping tools, use these semantic names to ensure",
        "consistent application of your design system. The AI will understand the",
        "intent behind each token and apply them appropriately.",
        "",
        "### Recommended Prompts:",
        f'- "Use `{color}brand-primary` for all primary action buttons"',
        f'- "Apply `{text}heading-lg` for section titles"',
        f'- "Use `{space}md` for standard component spacing"',
        "",
        "### CSS Class Examples:",
        f"- Background: `.bg-{color.replace('-', '', 1)}brand-primary`",
        f"- Text: `.text-{text.replace('-', '', 1)}heading-lg`",
        f"- Padding: `.p-{space.replace('-', '', 1)}md`",
    ]
    return "\n".join(guide)


def format_for_tool(tokens: list, tool: str) -> dict:
    return NamingFormatter().format_for_tool(tokens, tool)
