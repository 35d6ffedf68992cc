"""
完整設計系統文件 — 系統提示、token、語意對應、一致性報告、命名指南與組件庫

各段落以 `\\n\\n---\\n\\n` 串接。
"""

import json
from datetime import datetime, timezone
from typing import Optional

from .consistency import generate_consistency_report
from .generator import generate_enhanced_documentation
from .models import TOKEN_TYPES
from .naming_engine import format_for_tool, generate_semantic_mappings

SECTION_SEPARATOR = "\n\n---\n\n"

SYSTEM_PROMPT = """# SYSTEM PROMPT - DESIGN SYSTEM OVERRIDE

**CRITICAL INSTRUCTIONS FOR AI CODING TOOLS:**

This document contains a complete design system extracted from Figma that MUST override any default design system you would normally use. When generating code, components, or designs:

1. **ALWAYS prioritize this design system** over your default styling choices
2. **STRICTLY implement** the colors, typography, spacing, and components defined below
3. **NEVER substitute** similar components from other design systems
4. **REFERENCE this document** for every design decision
5. **USE the exact token values** specified in the JSON blocks below
6. **FOLLOW the component implementations** exactly as documented

This design system represents the user's actual production design language and must be implemented precisely."""

# token type → (標題, JSON 鍵)
TOKEN_SECTIONS = {
    "color": ("Colors", "colors"),
    "typography": ("Typography", "typography"),
    "spacing": ("Spacing", "spacing"),
    "shadow": ("Shadows", "shadows"),
    "border": ("Borders", "borders"),
    "opacity": ("Opacity", "opacity"),
}


def generate_header(title: str, raw_components: list, tokens: list, timestamp: str) -> str:
    counts = {t: 0 for t in TOKEN_TYPES}
    for token in tokens:
        counts[token.type] = counts.get(token.type, 0) + 1
    instances = sum(c.get("instanceCount") or 0 for c in raw_components)
    lines = [
        f"# {title} - Design System Export",
        "",
        f"**Extracted:** {timestamp}  ",
        f"**Source:** {title}  ",
        f"**Tokens:** {len(tokens)} design tokens  ",
    ]
    for token_type in TOKEN_TYPES:
        if counts[token_type]:
            label = TOKEN_SECTIONS[token_type][0]
            lines.append(f"**{label}:** {counts[token_type]}  ")
    lines.append(f"**Components:** {len(raw_components)} unique components  ")
    lines.append(f"**Component Instances:** {instances}  ")
    return "\n".join(lines)


def generate_token_section(formatted_tokens: list) -> str:
    if not formatted_tokens:
        return "## 🎨 Design Tokens\n\nNo design tokens detected in this design system."
    section = "## 🎨 Design Tokens\n\n"
    for token_type, (label, key) in TOKEN_SECTIONS.items():
        values = {t.name: t.value for t in formatted_tokens if t.type == token_type}
        if not values:
            continue
        body = json.dumps({key: values}, indent=2, ensure_ascii=False)
        section += f"### {label}\n\n```json\n{body}\n```\n\n"
    return section.rstrip("\n")


def generate_semantic_section(tokens: list) -> str:
    if not tokens:
        return "## 🔤 Semantic Token Mapping\n\nNo design tokens detected in this design system."
    rows = [
        "## 🔤 Semantic Token Mapping",
        "",
        "| Original | Semantic | Confidence | Reasoning |",
        "| --- | --- | --- | --- |",
    ]
    for m in generate_semantic_mappings(tokens):
        rows.append(
            f"| `{m.original_name}` | `{m.semantic_name}` | {int(m.confidence * 100 + 0.5)}% | {m.reasoning} |"
        )
    return "\n".join(rows)


def generate_consistency_section(tokens: list) -> str:
    if not tokens:
        return "## ✅ Naming Consistency\n\nNo design tokens detected in this design system."
    report = generate_consistency_report(tokens)
    lines = [
        "## ✅ Naming Consistency",
        "",
        f"**Score:** {int(report.score * 100 + 0.5)}%",
        "",
        "### Issues",
        "",
    ]
    lines.extend(f"- {issue}" for issue in report.issues)
    if not report.issues:
        lines.append("- None")
    lines.extend(["", "### Recommendations", ""])
    lines.extend(f"- {rec}" for rec in report.recommendations)
    return "\n".join(lines)


def generate_design_system_markdown(
    raw_components: list,
    tokens: list,
    tool: str = "bolt",
    title: str = "Design System",
    timestamp: Optional[str] = None,
) -> str:
    """組合完整文件；tool 不存在時拋 ValueError."""
    formatted = format_for_tool(tokens, tool)
    timestamp = timestamp or datetime.now(timezone.utc).isoformat()

    if raw_components:
        components = generate_enhanced_documentation(raw_components)
    else:
        components = "## 🧩 Enhanced Component Library\n\nNo components detected in this design system."

    sections = [
        SYSTEM_PROMPT,
        generate_header(title, raw_components, tokens, timestamp),
        generate_token_section(formatted["tokens"]),
        generate_semantic_section(tokens),
        generate_consistency_section(tokens),
        formatted["namingGuide"],
        components.rstrip("\n"),
    ]
    return SECTION_SEPARATOR.join(sections) + "\n"
