from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple


@dataclass(frozen=True)
class CategoryRule:
    """
    Keyword rule mapping a violation description to a category.
    """
    category: str
    keywords: Tuple[str, ...]

    def matches(self, description: str) -> bool:
        text = description.lower()
        return any(k in text for k in self.keywords)


# --------------------------------------------------
# Ordered Rules (first match wins)
# --------------------------------------------------

RULES: List[CategoryRule] = [
    CategoryRule(
        category="multiple_faces",
        keywords=("multiple faces", "multiple people", "more than one face", "another person"),
    ),
    CategoryRule(
        category="face_not_visible",
        keywords=("face not visible", "no face", "face not detected", "looking away", "left frame"),
    ),
    CategoryRule(
        category="object_detected",
        keywords=("phone", "book", "object", "laptop", "device"),
    ),
    CategoryRule(
        category="fullscreen_exit",
        keywords=("fullscreen", "full screen"),
    ),
    CategoryRule(
        category="tab_switch",
        keywords=("tab switch", "switched tab", "tab change", "new tab", "window switch", "focus lost"),
    ),
    CategoryRule(
        category="audio",
        keywords=("voice", "audio", "speech", "talking", "noise"),
    ),
]

OTHER = "other"


def categorize(description: str) -> str:
    for rule in RULES:
        if rule.matches(description):
            return rule.category
    return OTHER


def summarize(bookmarks: Iterable) -> Dict[str, object]:
    """
    Count bookmarks per category.
    """
    counts: Dict[str, int] = {}
    total = 0

    for b in bookmarks:
        counts[b.category] = counts.get(b.category, 0) + 1
        total += 1

    return {
        "total": total,
        "by_category": dict(sorted(counts.items())),
    }
