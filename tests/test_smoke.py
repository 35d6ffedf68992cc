"""
Smoke tests：驗證套件可匯入、版本與公開 API 存在。
"""


def test_import_package():
    """套件可正常匯入"""
    import devibe_docs
    assert devibe_docs.__version__ == "0.1.0"


def test_public_api():
    """公開 API 可從 devibe_docs 取得"""
    from devibe_docs import (
        __version__,
        NamingFormatter,
        FigmaComponentCollector,
        generate_design_system_markdown,
        generate_enhanced_documentation,
        generate_consistency_report,
        load_extraction,
        load_config,
        build_component_records,
        generate_tailwind_config,
        generate_utility_css,
    )
    assert __version__ == "0.1.0"
    assert callable(generate_design_system_markdown)
    assert callable(generate_enhanced_documentation)
    assert callable(generate_consistency_report)
    assert callable(load_extraction)
    assert callable(load_config)
    assert callable(build_component_records)
    assert generate_tailwind_config([]).rstrip().endswith("}")
    assert ":root {" in generate_utility_css([])
    assert NamingFormatter().presets
    assert FigmaComponentCollector().collect({}) == []


def test_minimal_pipeline():
    """最小輸入可跑完整條文件管線"""
    from devibe_docs import DesignToken, generate_design_system_markdown

    md = generate_design_system_markdown(
        [{"name": "Button/Primary", "instanceCount": 1}],
        [DesignToken(name="Brand", type="color", value="#000")],
        timestamp="2024-01-01",
    )
    assert "#### Button/Primary" in md
    assert md.endswith("\n")
