"""
Generator — classified components → markdown component library.

Each component gets a usage blurb, variant/context lists and a TSX scaffold.
"""

from __future__ import annotations

import re
from typing import Dict, List

from .classifier import process_components
from .models import CATEGORIES, ComponentRecord
from .supplementer import is_icon_heavy, supplement_with_common_patterns

CATEGORY_TITLES = {
    "ui": "🎛️ Interactive Components",
    "layout": "📐 Layout Components",
    "feedback": "💬 Feedback Components",
    "icon": "🎨 Icon Components",
}

MAX_ICONS = 5

# type → rendered tag; independent of which props get declared
HTML_ELEMENTS = {
    "button": "button",
    "input": "input",
    "card": "div",
    "modal": "div",
    "navigation": "nav",
    "icon": "span",
}


def _pascal(name: str) -> str:
    words = re.sub(r"[^a-zA-Z0-9]", " ", name).split(" ")
    return "".join(w[:1].upper() + w[1:].lower() for w in words)


def _class_slug(name: str) -> str:
    return re.sub(r"[^a-z0-9]", "-", name.lower())


def html_element(component_type: str) -> str:
    return HTML_ELEMENTS.get(component_type, "div")


def group_by_category(records: List[ComponentRecord]) -> Dict[str, List[ComponentRecord]]:
    grouped: Dict[str, List[ComponentRecord]] = {c: [] for c in CATEGORIES}
    for record in records:
        grouped.setdefault(record.category, []).append(record)
    return grouped


def render_scaffold(comp: ComponentRecord) -> str:
    name = _pascal(comp.name)
    slug = _class_slug(comp.name)
    tag = html_element(comp.type)
    multi = len(comp.variants) > 1
    interactive = comp.category == "ui"

    lines = ["```tsx", f"interface {name}Props {{"]
    lines.append("  children?: React.ReactNode;")
    lines.append("  className?: string;")
    if multi:
        union = " | ".join(f"'{v}'" for v in comp.variants)
        lines.append(f"  variant?: {union};")
    if interactive:
        lines.append("  disabled?: boolean;")
        lines.append("  onClick?: () => void;")
    lines.append("}")
    lines.append("")
    lines.append(f"export function {name}({{ ")
    lines.append("  children, ")
    lines.append("  className,")
    if multi:
        lines.append(f"  variant = '{comp.variants[0]}',")
    if interactive:
        lines.append("  disabled = false,")
        lines.append("  onClick,")
    lines.append("  ...props ")
    lines.append(f"}}: {name}Props) {{")
    lines.append("  return (")
    lines.append(f"    <{tag} ")
    lines.append("      className={cn(")
    lines.append(f'        "{slug}",')
    if multi:
        for v in comp.variants:
            lines.append(f"        variant === '{v}' && \"{slug}--{v}\",")
    lines.append("        className")
    lines.append("      )}")
    if interactive:
        lines.append("      disabled={disabled}")
        lines.append("      onClick={onClick}")
    lines.append("      {...props}")
    lines.append("    >")
    lines.append("      {children}")
    lines.append(f"    </{tag}>")
    lines.append("  );")
    lines.append("}")
    lines.append("```")
    return "\n".join(lines) + "\n\n"


def render_component_section(comp: ComponentRecord) -> str:
    section = f"#### {comp.name}\n\n"
    if comp.usage > 0:
        section += f"**Usage:** Used {comp.usage} times across the design system.\n\n"
    else:
        section += f"**Usage:** Common {comp.type} component pattern.\n\n"
    if len(comp.variants) > 1:
        section += f"**Variants:** {', '.join(comp.variants)}\n\n"
    if comp.contexts:
        section += f"**Used in:** {', '.join(comp.contexts)}\n\n"
    return section + render_scaffold(comp)


def render_category_section(category: str, records: List[ComponentRecord]) -> str:
    section = f"### {CATEGORY_TITLES.get(category, category)}\n\n"
    ordered = sorted(records, key=lambda r: r.priority, reverse=True)
    if category == "icon":
        ordered = ordered[:MAX_ICONS]
    for comp in ordered:
        section += render_component_section(comp)
    return section


def generate_component_markdown(records: List[ComponentRecord]) -> str:
    markdown = "## 🧩 Enhanced Component Library\n\n"
    for category, group in group_by_category(records).items():
        if group:
            markdown += render_category_section(category, group)
    return markdown


def build_component_records(raw_components: list) -> tuple:
    """Classified records as rendered, plus whether the set was icon-heavy."""
    records = process_components(raw_components)
    icon_heavy = is_icon_heavy(records)
    if icon_heavy:
        records = supplement_with_common_patterns(records)
    return records, icon_heavy


def generate_enhanced_documentation(raw_components: list) -> str:
    """Classify raw host records, supplement icon-heavy sets, render markdown."""
    print("🔧 Enhancing component documentation...")
    print(f"   Found {len(raw_components)} actual components from Figma")
    records, icon_heavy = build_component_records(raw_components)
    if icon_heavy:
        print("   📊 Icon-heavy system detected. Supplemented with common UI patterns.")
    return generate_component_markdown(records)

