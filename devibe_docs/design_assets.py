"""
設計資產輸入／輸出

讀取 Figma 外掛匯出的 extraction JSON，並寫出 markdown 與 docs-manifest.json。
"""

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .models import TOKEN_TYPES, DesignToken


def load_extraction(path: str) -> tuple:
    """
    讀取 extraction JSON，回傳 (file_name, raw_components, tokens)。

    支援兩種格式：
      - {"fileName", "components": [...], "tokens": [...]}
      - 舊版 {"componentAnalysis": {"componentUsage": [...]}}
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"找不到 extraction 檔案：{path}")
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"'{path}' 不是合法的 JSON：{e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"'{path}' 格式錯誤，應為 JSON 物件")

    metadata = data.get("metadata") if isinstance(data.get("metadata"), dict) else {}
    file_name = data.get("fileName") or metadata.get("fileName") or p.stem
    if not isinstance(file_name, str):
        raise ValueError(f"'{path}' 的 fileName 應為字串")

    if "components" in data:
        raw_components = _as_list(data.get("components"), path, "components")
    else:
        analysis = data.get("componentAnalysis") or {}
        if not isinstance(analysis, dict):
            raise ValueError(f"'{path}' 的 componentAnalysis 應為 JSON 物件")
        usage = _as_list(analysis.get("componentUsage"), path, "componentUsage")
        for i, entry in enumerate(usage):
            if not isinstance(entry, dict):
                raise ValueError(f"'{path}' componentUsage[{i}] 應為 JSON 物件")
        raw_components = [_from_component_usage(entry) for entry in usage]

    for i, raw in enumerate(raw_components):
        validate_component(raw, f"{path} components[{i}]")

    tokens = parse_tokens(_as_list(data.get("tokens"), path, "tokens"))
    print(f"   ✅ Loaded {len(raw_components)} components, {len(tokens)} tokens from {p.name}")
    return file_name, raw_components, tokens


def _as_list(value, path: str, field: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{path}' 的 {field} 應為 JSON 陣列")
    return list(value)


def validate_component(raw, where: str) -> None:
    """原始組件紀錄的基本型別檢查，不合法時拋 ValueError."""
    if not isinstance(raw, dict):
        raise ValueError(f"{where}: 組件紀錄應為 JSON 物件，目前是 {type(raw).__name__}")
    name = raw.get("name")
    if not isinstance(name, str) or not name:
        raise ValueError(f"{where}: 組件缺少字串 name")
    count = raw.get("instanceCount")
    if count is not None and (isinstance(count, bool) or not isinstance(count, int)):
        raise ValueError(f"{where} ({name}): instanceCount 應為整數")
    for field in ("variants", "usageContexts"):
        value = raw.get(field)
        if value is not None and not isinstance(value, list):
            raise ValueError(f"{where} ({name}): {field} 應為 JSON 陣列")
    if not all(isinstance(ctx, str) for ctx in raw.get("usageContexts") or []):
        raise ValueError(f"{where} ({name}): usageContexts 只能包含字串")


def _from_component_usage(entry: dict) -> dict:
    contexts = []
    for instance in entry.get("instances") or []:
        if not isinstance(instance, dict):
            continue
        ctx = instance.get("context")
        if ctx and ctx not in contexts:
            contexts.append(ctx)
    return {
        "name": entry.get("name", ""),
        "instanceCount": entry.get("count", 0),
        "usageContexts": contexts,
        "variants": entry.get("variants") or [],
        "pages": entry.get("pages") or [],
    }


def parse_tokens(raw_tokens: list) -> list:
    tokens = []
    for raw in raw_tokens:
        if not isinstance(raw, dict):
            continue
        token_type = raw.get("type")
        if token_type not in TOKEN_TYPES:
            print(f"   ⚠️  略過未知類型的 token '{raw.get('name', '?')}'（type={token_type}）")
            continue
        tokens.append(DesignToken.from_dict(raw))
    return tokens


def write_extraction(path: str, file_name: str, raw_components: list, tokens: Optional[list] = None) -> str:
    payload = {
        "fileName": file_name,
        "components": raw_components,
        "tokens": [t.to_dict() for t in tokens or []],
    }
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
    return str(out)


def write_markdown(path: str, content: str) -> str:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding="utf-8")
    return str(out)


def write_docs_manifest(
    output_dir: str,
    source: str,
    tool: str,
    records: list,
    token_count: int,
    consistency_score: Optional[float] = None,
    extracted_count: Optional[int] = None,
    output_format: str = "markdown",
) -> str:
    """
    在 output_dir 寫入 docs-manifest.json。

    records 為實際輸出的組件（含補充樣板），extracted_count 為來源檔案中的組件數。
    """
    by_category: dict[str, int] = {}
    for record in records:
        by_category[record.category] = by_category.get(record.category, 0) + 1
    manifest = {
        "source": source,
        "generator": "devibe_docs",
        "tool": tool,
        "format": output_format,
        "generatedAt": datetime.now(timezone.utc).isoformat(),
        "componentCount": len(records),
        "extractedComponentCount": len(records) if extracted_count is None else extracted_count,
        "componentsByCategory": by_category,
        "tokenCount": token_count,
        "consistencyScore": consistency_score,
    }
    path = os.path.join(output_dir, "docs-manifest.json")
    os.makedirs(output_dir, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, ensure_ascii=False)
    return path
