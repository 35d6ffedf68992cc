"""設定檔載入與基本驗證."""

import json
from pathlib import Path
from typing import Any

from .naming_engine import NAMING_PRESETS

DEFAULT_CONFIG_PATH = "devibe-docs.config.json"

# 已知有效的頂層欄位
_KNOWN_TOP_KEYS = {"figma", "naming", "document", "output"}

# 各區塊已知欄位（用於拼字提示）
_KNOWN_SECTION_KEYS = {
    "figma": {"personalAccessToken", "fileKey"},
    "naming": {"tool"},
    "document": {"title", "includeTokens"},
    "output": {"path", "manifest", "format"},
}

_VALID_TOOLS = set(NAMING_PRESETS) | {"figma-make"}
_VALID_FORMATS = {"markdown", "tailwind", "css"}


def _warn(msg: str) -> None:
    print(f"   ⚠️  [config] {msg}")


def validate_config(cfg: dict) -> None:
    """對 config 做基本欄位驗證，印出警告但不拋例外。"""
    if not cfg:
        return

    for key in cfg:
        if key not in _KNOWN_TOP_KEYS:
            known = ", ".join(sorted(_KNOWN_TOP_KEYS))
            _warn(f"未知頂層欄位 '{key}'（已知欄位：{known}）")

    for section, known_keys in _KNOWN_SECTION_KEYS.items():
        section_cfg = cfg.get(section, {})
        if not isinstance(section_cfg, dict):
            _warn(f"[{section}] 應為 JSON 物件，目前是 {type(section_cfg).__name__}")
            continue
        for key in section_cfg:
            if key not in known_keys:
                known = ", ".join(sorted(known_keys))
                _warn(f"[{section}] 未知欄位 '{key}'（已知欄位：{known}）")

    tool = _section(cfg, "naming").get("tool")
    if tool and (not isinstance(tool, str) or tool not in _VALID_TOOLS):
        valid = ", ".join(sorted(_VALID_TOOLS))
        _warn(f"naming.tool '{tool}' 不在已知值中（{valid}）")

    output_format = _section(cfg, "output").get("format")
    if output_format is not None and (not isinstance(output_format, str) or output_format not in _VALID_FORMATS):
        valid = ", ".join(sorted(_VALID_FORMATS))
        _warn(f"output.format '{output_format}' 不在已知值中（{valid}），改用 markdown")

    include_tokens = _section(cfg, "document").get("includeTokens")
    if include_tokens is not None and not isinstance(include_tokens, bool):
        _warn(f"document.includeTokens 應為布林值，目前是 {type(include_tokens).__name__}")


def _section(cfg: dict, name: str) -> dict:
    section = cfg.get(name, {})
    return section if isinstance(section, dict) else {}


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> dict:
    """載入 JSON 設定檔，不存在則回傳空 dict；存在則做基本驗證。"""
    path = Path(config_path)
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        cfg: Any = json.load(f)
    if not isinstance(cfg, dict):
        print(f"   ⚠️  [config] '{config_path}' 格式錯誤，應為 JSON 物件，回傳空設定。")
        return {}
    validate_config(cfg)
    return cfg
