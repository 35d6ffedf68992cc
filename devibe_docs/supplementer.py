"""
Icon 為主的設計系統補充：加入常見 UI 組件樣板
"""

from .models import ComponentRecord

ICON_HEAVY_THRESHOLD = 0.7

COMMON_UI_PATTERNS = (
    ComponentRecord(
        name="Button/Primary",
        type="button",
        variants=("default", "hover", "pressed", "disabled"),
        usage=25,
        contexts=("forms", "navigation", "calls-to-action"),
        category="ui",
        priority=100,
    ),
    ComponentRecord(
        name="Button/Secondary",
        type="button",
        variants=("default", "outline", "ghost"),
        usage=18,
        contexts=("forms", "navigation"),
        category="ui",
        priority=90,
    ),
    ComponentRecord(
        name="Input/Text Field",
        type="input",
        variants=("default", "focused", "error", "disabled"),
        usage=15,
        contexts=("forms", "search", "data-entry"),
        category="ui",
        priority=85,
    ),
    ComponentRecord(
        name="Card/Content",
        type="card",
        variants=("default", "elevated", "outlined"),
        usage=12,
        contexts=("content-display", "product-cards"),
        category="ui",
        priority=80,
    ),
    ComponentRecord(
        name="Navigation/Menu",
        type="navigation",
        variants=("horizontal", "vertical", "mobile"),
        usage=8,
        contexts=("site-navigation", "app-navigation"),
        category="ui",
        priority=75,
    ),
)


def is_icon_heavy(records: list) -> bool:
    """icon 佔比超過 70% 才算；空清單一律為 False."""
    if not records:
        return False
    icon_count = sum(1 for r in records if r.category == "icon")
    return icon_count / len(records) > ICON_HEAVY_THRESHOLD


def supplement_with_common_patterns(records: list) -> list:
    """合併尚未存在（名稱不分大小寫）的常見樣板，依 priority 由高到低排序."""
    existing = {r.name.lower() for r in records}
    merged = list(records)
    for pattern in COMMON_UI_PATTERNS:
        if pattern.name.lower() not in existing:
            merged.append(pattern)
    return sorted(merged, key=lambda r: r.priority, reverse=True)
