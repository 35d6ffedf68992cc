"""
Markdown / TSX scaffold 產生測試
"""
from devibe_docs.classifier import classify_component
from devibe_docs.generator import (
    generate_component_markdown,
    generate_enhanced_documentation,
    group_by_category,
    html_element,
    render_component_section,
    render_scaffold,
)
from devibe_docs.models import ComponentRecord


def button_primary():
    return classify_component({
        "name": "Button/Primary",
        "instanceCount": 89,
        "usageContexts": ["hero-section", "form-footer"],
        "variants": ["default", "loading", "disabled"],
    })


# ─── scaffold ────────────────────────────────────────────────────────────────

def test_ui_scaffold_has_variant_union_and_interaction_props():
    block = render_scaffold(button_primary())
    assert "interface ButtonPrimaryProps {" in block
    assert "  variant?: 'default' | 'loading' | 'disabled';" in block
    assert "  disabled?: boolean;" in block
    assert "  onClick?: () => void;" in block
    assert "  variant = 'default'," in block
    assert "        variant === 'loading' && \"button-primary--loading\"," in block
    assert "    <button \n" in block
    assert "    </button>\n" in block


def test_icon_scaffold_has_no_interaction_props():
    icon = classify_component({"name": "lucide/earth", "instanceCount": 4})
    block = render_scaffold(icon)
    assert "disabled" not in block
    assert "onClick" not in block
    assert "variant" not in block
    assert "    <span \n" in block


def test_exact_single_variant_scaffold():
    record = ComponentRecord(name="Card/Content", type="card", category="ui", priority=40)
    expected = (
        "```tsx\n"
        "interface CardContentProps {\n"
        "  children?: React.ReactNode;\n"
        "  className?: string;\n"
        "  disabled?: boolean;\n"
        "  onClick?: () => void;\n"
        "}\n"
        "\n"
        "export function CardContent({ \n"
        "  children, \n"
        "  className,\n"
        "  disabled = false,\n"
        "  onClick,\n"
        "  ...props \n"
        "}: CardContentProps) {\n"
        "  return (\n"
        "    <div \n"
        "      className={cn(\n"
        "        \"card-content\",\n"
        "        className\n"
        "      )}\n"
        "      disabled={disabled}\n"
        "      onClick={onClick}\n"
        "      {...props}\n"
        "    >\n"
        "      {children}\n"
        "    </div>\n"
        "  );\n"
        "}\n"
        "```\n\n"
    )
    assert render_scaffold(record) == expected


def test_input_tag_keeps_closing_tag_and_children():
    record = classify_component({"name": "Input/Text Field", "instanceCount": 1})
    block = render_scaffold(record)
    assert "    <input \n" in block
    assert "      {children}\n    </input>\n" in block
    assert "InputTextField" in block
    assert '"input-text-field"' in block


def test_navigation_tag_carries_ui_props():
    record = classify_component({"name": "Navigation/Menu"})
    block = render_scaffold(record)
    assert "    <nav \n" in block
    assert "      disabled={disabled}\n" in block


def test_html_element_default():
    assert html_element("component") == "div"
    assert html_element("modal") == "div"


# ─── 組件段落 ────────────────────────────────────────────────────────────────

def test_component_section_usage_variants_contexts():
    section = render_component_section(button_primary())
    assert section.startswith("#### Button/Primary\n\n")
    assert "**Usage:** Used 89 times across the design system.\n\n" in section
    assert "**Variants:** default, loading, disabled\n\n" in section
    assert "**Used in:** hero-section, form-footer\n\n" in section


def test_component_section_without_usage():
    section = render_component_section(classify_component({"name": "Modal"}))
    assert "**Usage:** Common modal component pattern.\n\n" in section
    assert "**Variants:**" not in section
    assert "**Used in:**" not in section


# ─── 分類段落 ────────────────────────────────────────────────────────────────

def test_group_by_category_fixed_order():
    grouped = group_by_category([classify_component({"name": "lucide/x"})])
    assert list(grouped) == ["ui", "layout", "feedback", "icon"]


def test_markdown_skips_empty_categories_and_caps_icons():
    raws = [{"name": f"Icon/Glyph {i}", "instanceCount": 100 + i} for i in range(8)]
    raws.append({"name": "Button/Primary", "instanceCount": 3})
    records = [classify_component(r) for r in raws]
    md = generate_component_markdown(records)
    assert md.startswith("## 🧩 Enhanced Component Library\n\n")
    assert "### 🎛️ Interactive Components" in md
    assert "### 📐 Layout Components" not in md
    assert "### 💬 Feedback Components" not in md
    assert md.count("#### Icon/Glyph") == 5
    # 依 priority 由高到低
    assert md.index("#### Icon/Glyph 7") < md.index("#### Icon/Glyph 3")
    assert "#### Icon/Glyph 2" not in md


def test_non_icon_categories_unlimited():
    records = [classify_component({"name": f"Tile {i}"}) for i in range(9)]
    assert generate_component_markdown(records).count("#### Tile") == 9


def test_enhanced_documentation_supplements_icon_heavy(capsys):
    raws = [{"name": f"lucide/icon-{i}"} for i in range(10)]
    md = generate_enhanced_documentation(raws)
    assert "#### Button/Primary" in md
    assert "#### Navigation/Menu" in md
    assert "Icon-heavy system detected" in capsys.readouterr().out


def test_enhanced_documentation_without_supplement():
    md = generate_enhanced_documentation([{"name": "Card/Product", "instanceCount": 2}])
    assert "#### Card/Product" in md
    assert "#### Button/Primary" not in md


def test_enhanced_documentation_empty_input():
    assert generate_enhanced_documentation([]) == "## 🧩 Enhanced Component Library\n\n"
