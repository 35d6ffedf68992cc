"""
CLI 指令測試：generate / audit / guide / fetch 參數與錯誤處理
"""
import json
from unittest.mock import patch

import pytest
import requests

from devibe_docs.cli import build_parser, main, perform_generate


def write_extraction(tmp_path, tokens=True):
    payload = {
        "fileName": "Acme UI",
        "components": [
            {"name": "Button/Primary", "instanceCount": 5, "variants": ["default", "hover"]},
            {"name": "lucide/star", "instanceCount": 2},
        ],
        "tokens": [
            {"name": "Primary Blue", "type": "color", "value": "#3366ff"},
            {"name": "Spacing MD", "type": "spacing", "value": 16},
        ] if tokens else [],
    }
    path = tmp_path / "extraction.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def no_config(tmp_path):
    return ["--config", str(tmp_path / "none.json")]


# ─── generate ────────────────────────────────────────────────────────────────

def test_generate_full_document(tmp_path):
    src = write_extraction(tmp_path)
    out = tmp_path / "DESIGN_SYSTEM.md"
    assert main(no_config(tmp_path) + ["generate", src, "-o", str(out)]) == 0
    md = out.read_text(encoding="utf-8")
    assert md.startswith("# SYSTEM PROMPT - DESIGN SYSTEM OVERRIDE")
    assert "# Acme UI - Design System Export" in md
    assert '"color-primary-blue": "#3366ff"' in md
    assert "#### Button/Primary" in md
    assert not (tmp_path / "docs-manifest.json").exists()


def test_generate_components_only_with_manifest(tmp_path):
    src = write_extraction(tmp_path)
    out = tmp_path / "docs" / "COMPONENTS.md"
    code = main(no_config(tmp_path) + [
        "generate", src, "-o", str(out), "--components-only", "--manifest", "--tool", "cursor",
    ])
    assert code == 0
    md = out.read_text(encoding="utf-8")
    assert md.startswith("## 🧩 Enhanced Component Library")
    manifest = json.loads((tmp_path / "docs" / "docs-manifest.json").read_text(encoding="utf-8"))
    assert manifest["tool"] == "cursor"
    assert manifest["componentCount"] == 2
    assert manifest["extractedComponentCount"] == 2
    assert manifest["tokenCount"] == 2
    assert manifest["consistencyScore"] is not None


def test_generate_uses_config_defaults(tmp_path):
    src = write_extraction(tmp_path)
    out = tmp_path / "from-config.md"
    cfg = tmp_path / "devibe-docs.config.json"
    cfg.write_text(json.dumps({
        "naming": {"tool": "loveable"},
        "document": {"title": "Brand Kit"},
        "output": {"path": str(out)},
    }), encoding="utf-8")
    assert main(["--config", str(cfg), "generate", src]) == 0
    md = out.read_text(encoding="utf-8")
    assert "# Brand Kit - Design System Export" in md
    assert '"clr-primary-blue": "#3366ff"' in md


def test_generate_include_tokens_false_means_components_only(tmp_path):
    src = write_extraction(tmp_path)
    out = tmp_path / "c.md"
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"document": {"includeTokens": False}}), encoding="utf-8")
    assert main(["--config", str(cfg), "generate", src, "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8").startswith("## 🧩 Enhanced Component Library")


def test_generate_missing_input_fails(tmp_path, capsys):
    code = main(no_config(tmp_path) + ["generate", str(tmp_path / "missing.json")])
    assert code == 1
    assert "❌" in capsys.readouterr().out


def test_generate_rejects_unknown_tool(tmp_path):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["generate", "x.json", "--tool", "copilot"])


# ─── audit / guide ───────────────────────────────────────────────────────────

def test_audit_prints_report(tmp_path, capsys):
    src = write_extraction(tmp_path)
    assert main(no_config(tmp_path) + ["audit", src]) == 0
    out = capsys.readouterr().out
    assert "Primary Blue → primary" in out
    assert "Consistency score:" in out


def test_audit_without_tokens(tmp_path, capsys):
    src = write_extraction(tmp_path, tokens=False)
    assert main(no_config(tmp_path) + ["audit", src]) == 0
    assert "沒有 token" in capsys.readouterr().out


def test_guide_alias(tmp_path, capsys):
    assert main(no_config(tmp_path) + ["guide", "figma-make"]) == 0
    out = capsys.readouterr().out
    assert "# Naming Guide for FigmaMake" in out
    assert "`type-heading-lg`" in out


def test_no_command_prints_help(tmp_path, capsys):
    assert main(no_config(tmp_path)) == 0
    assert "devibe-docs" in capsys.readouterr().out


# ─── fetch ───────────────────────────────────────────────────────────────────

def test_fetch_without_token_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("FIGMA_TOKEN", raising=False)
    assert main(no_config(tmp_path) + ["fetch", "--file-key", "ABC"]) == 1
    assert "FIGMA_TOKEN" in capsys.readouterr().out


def test_fetch_without_file_key_fails(tmp_path, monkeypatch):
    monkeypatch.setenv("FIGMA_TOKEN", "t")
    assert main(no_config(tmp_path) + ["fetch"]) == 1


def test_fetch_writes_extraction(tmp_path, monkeypatch):
    monkeypatch.setenv("FIGMA_TOKEN", "t")
    out = tmp_path / "extraction.json"
    records = [{"name": "Button", "instanceCount": 1, "usageContexts": [], "variants": [], "pages": []}]
    with patch("devibe_docs.cli.fetch_raw_components", return_value=("Acme UI", records)) as mock_fetch:
        code = main(no_config(tmp_path) + ["fetch", "--file-key", "ABC", "-o", str(out)])
    assert code == 0
    mock_fetch.assert_called_once_with("t", "ABC")
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["fileName"] == "Acme UI"
    assert data["components"] == records


def test_fetch_403_hint(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("FIGMA_TOKEN", "t")
    response = requests.Response()
    response.status_code = 403
    error = requests.HTTPError("forbidden", response=response)
    with patch("devibe_docs.cli.fetch_raw_components", side_effect=error):
        assert main(no_config(tmp_path) + ["fetch", "--file-key", "ABC"]) == 1
    assert "403" in capsys.readouterr().out


def test_fetch_connection_error(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("FIGMA_TOKEN", "t")
    with patch("devibe_docs.cli.fetch_raw_components", side_effect=requests.ConnectionError("down")):
        assert main(no_config(tmp_path) + ["fetch", "--file-key", "ABC"]) == 1
    assert "無法連線" in capsys.readouterr().out


# ─── 不合法輸入與寫入失敗 ────────────────────────────────────────────────────

@pytest.mark.parametrize("components", [["Button/Primary"], [{"name": None}]])
def test_generate_malformed_components_fails_cleanly(tmp_path, capsys, components):
    src = tmp_path / "bad.json"
    src.write_text(json.dumps({"components": components}), encoding="utf-8")
    code = main(no_config(tmp_path) + ["generate", str(src), "-o", str(tmp_path / "out.md")])
    assert code == 1
    assert "❌" in capsys.readouterr().out
    assert not (tmp_path / "out.md").exists()


def test_generate_output_is_directory_fails_cleanly(tmp_path, capsys):
    src = write_extraction(tmp_path)
    out_dir = tmp_path / "docs"
    out_dir.mkdir()
    assert main(no_config(tmp_path) + ["generate", src, "-o", str(out_dir)]) == 1
    assert "無法寫入輸出檔" in capsys.readouterr().out


def test_perform_generate_returns_false_on_bad_input(tmp_path):
    src = tmp_path / "bad.json"
    src.write_text(json.dumps({"components": [{"name": None}]}), encoding="utf-8")
    options = {
        "tool": "bolt", "format": "markdown", "output": str(tmp_path / "o.md"),
        "title": None, "components_only": False, "manifest": False,
    }
    assert perform_generate(str(src), options) is False


# ─── --format ────────────────────────────────────────────────────────────────

def test_generate_tailwind_format(tmp_path, monkeypatch):
    src = write_extraction(tmp_path)
    monkeypatch.chdir(tmp_path)
    assert main(no_config(tmp_path) + ["generate", src, "--format", "tailwind"]) == 0
    text = (tmp_path / "tailwind.config.js").read_text(encoding="utf-8")
    assert "module.exports = " in text
    assert '"primary-blue"' in text


def test_generate_css_format(tmp_path):
    src = write_extraction(tmp_path)
    out = tmp_path / "styles" / "design-system.css"
    assert main(no_config(tmp_path) + ["generate", src, "-f", "css", "-o", str(out)]) == 0
    css = out.read_text(encoding="utf-8")
    assert "  --color-primary-blue: #3366ff;" in css
    assert ".p-spacing-md { padding: var(--space-spacing-md); }" in css


def test_format_from_config(tmp_path):
    src = write_extraction(tmp_path)
    out = tmp_path / "theme.css"
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"output": {"format": "css", "path": str(out)}}), encoding="utf-8")
    assert main(["--config", str(cfg), "generate", src]) == 0
    assert out.read_text(encoding="utf-8").startswith("/**\n * AI-Optimized Design System Utilities")


def test_manifest_counts_supplemented_library(tmp_path):
    src = tmp_path / "icons.json"
    src.write_text(json.dumps({
        "fileName": "Icons",
        "components": [{"name": f"lucide/icon-{i}"} for i in range(10)],
    }), encoding="utf-8")
    out = tmp_path / "DESIGN.md"
    assert main(no_config(tmp_path) + ["generate", src.as_posix(), "-o", str(out), "--manifest"]) == 0
    manifest = json.loads((tmp_path / "docs-manifest.json").read_text(encoding="utf-8"))
    assert manifest["componentCount"] == 15
    assert manifest["extractedComponentCount"] == 10
    assert manifest["componentsByCategory"] == {"icon": 10, "ui": 5}
    assert manifest["tokenCount"] == 0
    assert manifest["consistencyScore"] is None
