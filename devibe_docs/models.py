"""
資料模型 — 組件紀錄、設計 token 與分析結果

全部為 dataclass；ComponentRecord / DesignToken 為 frozen，
格式化時以 dataclasses.replace 產生新值，不修改原物件。
"""

from dataclasses import dataclass, field
from typing import Any, Optional

CATEGORIES = ("ui", "layout", "feedback", "icon")
TOKEN_TYPES = ("color", "spacing", "typography", "shadow", "border", "opacity")
CONVENTIONS = ("kebab-case", "camelCase", "PascalCase", "snake_case")


@dataclass(frozen=True)
class ComponentRecord:
    """分類後的組件紀錄."""
    name: str
    type: str
    variants: tuple = ("default",)
    usage: int = 0
    contexts: tuple = ()
    category: str = "ui"
    priority: float = 0

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.type,
            "variants": list(self.variants),
            "usage": self.usage,
            "contexts": list(self.contexts),
            "category": self.category,
            "priority": self.priority,
        }


@dataclass(frozen=True)
class DesignToken:
    """設計 token；semantic_role 僅對 color 有意義."""
    name: str
    type: str
    value: Any = None
    semantic_name: Optional[str] = None
    semantic_role: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "DesignToken":
        return cls(
            name=str(data.get("name", "")),
            type=data.get("type", ""),
            value=data.get("value"),
            semantic_name=data.get("semanticName"),
            semantic_role=data.get("semanticRole"),
            description=data.get("description"),
        )

    def to_dict(self) -> dict:
        out = {"name": self.name, "type": self.type}
        if self.value is not None:
            out["value"] = self.value
        if self.semantic_name is not None:
            out["semanticName"] = self.semantic_name
        if self.semantic_role is not None:
            out["semanticRole"] = self.semantic_role
        if self.description is not None:
            out["description"] = self.description
        return out


@dataclass(frozen=True)
class SemanticMapping:
    original_name: str
    semantic_name: str
    confidence: float
    reasoning: str


@dataclass
class ConsistencyReport:
    score: float
    issues: list = field(default_factory=list)
    recommendations: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class NamingPattern:
    """單一 AI 工具的命名預設."""
    color_prefix: str
    spacing_prefix: str
    text_prefix: str
    convention: str
    semantic_priority: bool
