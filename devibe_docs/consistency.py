"""Token 命名一致性稽核."""

import re

from .models import ConsistencyReport

_KEBAB_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
_CAMEL_RE = re.compile(r"^[a-z][a-zA-Z0-9]*$")
_SNAKE_RE = re.compile(r"^[a-z0-9]+(_[a-z0-9]+)*$")

_GENERIC_NAME_RES = (
    re.compile(r"^(color|text|spacing|font)[\d]*$", re.I),
    re.compile(r"^(item|element|component)[\d]*$", re.I),
)
_NUMERIC_SUFFIX_RE = re.compile(r"\d+$")
_CAMEL_HUMP_RE = re.compile(r"[a-z][A-Z]")

MAX_ANTI_PATTERN_PENALTY = 0.3


def _percent(ratio: float) -> int:
    return int(ratio * 100 + 0.5)


def naming_consistency(tokens: list) -> float:
    """最大命名慣例群組佔全部 token 的比例（空清單為 0）."""
    if not tokens:
        return 0.0
    kebab = sum(1 for t in tokens if _KEBAB_RE.match(t.name))
    camel = sum(1 for t in tokens if _CAMEL_RE.match(t.name))
    snake = sum(1 for t in tokens if _SNAKE_RE.match(t.name))
    other = len(tokens) - kebab - camel - snake
    return max(kebab, camel, snake, other) / len(tokens)


def semantic_coverage(tokens: list) -> float:
    if not tokens:
        return 0.0
    covered = [t for t in tokens if t.semantic_name and t.semantic_name != t.name]
    return len(covered) / len(tokens)


def detect_anti_patterns(tokens: list) -> list:
    anti_patterns = []

    generic = [t for t in tokens if any(p.match(t.name) for p in _GENERIC_NAME_RES)]
    if generic:
        anti_patterns.append(f'{len(generic)} tokens use generic names (e.g., "color1", "text2")')

    numbered = [t for t in tokens if _NUMERIC_SUFFIX_RE.search(t.name)]
    if len(numbered) > len(tokens) * 0.5:
        anti_patterns.append("Over 50% of tokens use numeric suffixes, consider semantic naming")

    has_kebab = any("-" in t.name for t in tokens)
    has_underscore = any("_" in t.name for t in tokens)
    has_camel = any(_CAMEL_HUMP_RE.search(t.name) for t in tokens)
    if sum([has_kebab, has_underscore, has_camel]) > 1:
        anti_patterns.append("Mixed naming conventions detected (kebab-case, snake_case, camelCase)")

    return anti_patterns


def calculate_overall_score(consistency: float, coverage: float, anti_pattern_count: int) -> float:
    base = (consistency + coverage) / 2
    penalty = min(anti_pattern_count * 0.1, MAX_ANTI_PATTERN_PENALTY)
    return max(0.0, base - penalty)


def generate_consistency_report(tokens: list) -> ConsistencyReport:
    """每次呼叫重新計算，不保留歷史."""
    issues = []
    recommendations = []

    consistency = naming_consistency(tokens)
    if consistency < 0.8:
        issues.append(f"Naming consistency is {_percent(consistency)}% (below 80% threshold)")
        recommendations.append("Standardize naming conventions across all tokens")

    coverage = semantic_coverage(tokens)
    if coverage < 0.7:
        issues.append(f"Only {_percent(coverage)}% of tokens have semantic names")
        recommendations.append("Add semantic names to improve AI tool comprehension")

    anti_patterns = detect_anti_patterns(tokens)
    issues.extend(anti_patterns)

    score = calculate_overall_score(consistency, coverage, len(anti_patterns))
    if score >= 0.9:
        recommendations.append("Excellent naming! Your tokens are well-optimized for AI tools.")
    elif score >= 0.7:
        recommendations.append("Good naming with room for improvement. Focus on consistency and semantic clarity.")
    else:
        recommendations.append("Significant improvements needed. Consider refactoring token names for better AI compatibility.")

    return ConsistencyReport(score=score, issues=issues, recommendations=recommendations)
