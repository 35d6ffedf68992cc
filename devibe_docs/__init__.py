"""
DeVibe Docs — Figma 組件 / 設計 token → AI 友善 markdown 文件（Python 管線）

組件分類與計分、icon 為主時補充常見 UI 樣板、依 AI 工具改寫 token 命名、
命名一致性稽核，最後輸出 markdown 與 TSX scaffold，
或 tailwind.config.js 與 utility CSS。
"""

__version__ = "0.1.0"

from .models import (
    ComponentRecord,
    DesignToken,
    SemanticMapping,
    ConsistencyReport,
    NamingPattern,
)
from .classifier import (
    classify_component,
    categorize_component,
    determine_category,
    calculate_priority,
    process_components,
)
from .supplementer import COMMON_UI_PATTERNS, is_icon_heavy, supplement_with_common_patterns
from .naming_engine import (
    NAMING_PRESETS,
    NamingFormatter,
    format_for_tool,
    analyze_token_semantics,
    generate_semantic_mappings,
    generate_naming_guide,
)
from .consistency import generate_consistency_report, detect_anti_patterns
from .generator import build_component_records, generate_component_markdown, generate_enhanced_documentation
from .document import generate_design_system_markdown
from .tailwind_config import generate_tailwind_config
from .utility_css import generate_utility_css
from .design_assets import load_extraction, write_markdown, write_docs_manifest
from .figma_reader import FigmaAPIClient, FigmaComponentCollector
from .config import load_config, validate_config

__all__ = [
    "__version__",
    "ComponentRecord",
    "DesignToken",
    "SemanticMapping",
    "ConsistencyReport",
    "NamingPattern",
    "classify_component",
    "categorize_component",
    "determine_category",
    "calculate_priority",
    "process_components",
    "COMMON_UI_PATTERNS",
    "is_icon_heavy",
    "supplement_with_common_patterns",
    "NAMING_PRESETS",
    "NamingFormatter",
    "format_for_tool",
    "analyze_token_semantics",
    "generate_semantic_mappings",
    "generate_naming_guide",
    "generate_consistency_report",
    "detect_anti_patterns",
    "build_component_records",
    "generate_component_markdown",
    "generate_enhanced_documentation",
    "generate_design_system_markdown",
    "generate_tailwind_config",
    "generate_utility_css",
    "load_extraction",
    "write_markdown",
    "write_docs_manifest",
    "FigmaAPIClient",
    "FigmaComponentCollector",
    "load_config",
    "validate_config",
]
