"""
組件分類與優先度計分

規則為有序 (regex, 結果) 清單，先符合者勝出；順序即優先權。
"""

import re
from typing import Iterable

from .models import ComponentRecord

# 類型規則：button → input → card → modal → navigation → icon
_TYPE_RULES = [
    (re.compile(r"button|btn", re.I), "button"),
    (re.compile(r"input|field|text", re.I), "input"),
    (re.compile(r"card|panel|tile", re.I), "card"),
    (re.compile(r"modal|dialog", re.I), "modal"),
    (re.compile(r"nav|menu", re.I), "navigation"),
    (re.compile(r"icon|lucide|feather", re.I), "icon"),
]

_ICON_KEYWORDS = re.compile(r"icon|lucide|feather|heroicon", re.I)

_CATEGORY_RULES = [
    (_ICON_KEYWORDS, "icon"),
    (re.compile(r"layout|container|wrapper|grid", re.I), "layout"),
    (re.compile(r"loading|spinner|toast|alert", re.I), "feedback"),
]

_PRIORITY_BONUSES = [
    (re.compile(r"button", re.I), 50),
    (re.compile(r"input|field", re.I), 45),
    (re.compile(r"card", re.I), 40),
    (re.compile(r"modal", re.I), 35),
    (re.compile(r"nav", re.I), 30),
    (re.compile(r"primary", re.I), 20),
    (re.compile(r"secondary", re.I), 15),
]

ICON_PRIORITY_FLOOR = 10
ICON_PENALTY = 20


def categorize_component(name: str) -> str:
    """回傳組件 type tag，無符合時為 'component'."""
    lower = name.lower()
    for pattern, component_type in _TYPE_RULES:
        if pattern.search(lower):
            return component_type
    return "component"


def determine_category(name: str) -> str:
    lower = name.lower()
    for pattern, category in _CATEGORY_RULES:
        if pattern.search(lower):
            return category
    return "ui"


def calculate_priority(name: str, usage: int) -> int:
    """usage * 2 + 名稱加分；icon 扣分後不低於 ICON_PRIORITY_FLOOR."""
    priority = usage * 2
    lower = name.lower()
    for pattern, bonus in _PRIORITY_BONUSES:
        if pattern.search(lower):
            priority += bonus
    if _ICON_KEYWORDS.search(lower):
        priority = max(ICON_PRIORITY_FLOOR, priority - ICON_PENALTY)
    return priority


def extract_variants(raw: dict) -> tuple:
    variants = raw.get("variants") or []
    if not variants:
        return ("default",)
    names = []
    for v in variants:
        if isinstance(v, dict):
            names.append(str(v.get("name") or "default"))
        else:
            names.append(str(v) if v else "default")
    return tuple(names)


def classify_component(raw: dict) -> ComponentRecord:
    """將宿主端的原始組件紀錄轉為 ComponentRecord（缺欄位時套用預設）."""
    name = raw.get("name", "")
    usage = raw.get("instanceCount") or 0
    return ComponentRecord(
        name=name,
        type=categorize_component(name),
        variants=extract_variants(raw),
        usage=usage,
        contexts=tuple(raw.get("usageContexts") or ()),
        category=determine_category(name),
        priority=calculate_priority(name, usage),
    )


def process_components(raw_components: Iterable[dict]) -> list:
    return [classify_component(raw) for raw in raw_components]
