"""Data models for recipe-dedup."""
from dataclasses import dataclass, field, replace as _replace
from typing import Any, Dict, List, Optional

# Fields the engine knows about; everything else is carried in Recipe.extra
_KNOWN_FIELDS = ("id", "title", "ingredients", "instructions", "image",
                 "category", "tags", "author")


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


@dataclass
class Recipe:
    id: str = ""
    title: str = ""
    ingredients: List[str] = field(default_factory=list)  # "<amount> <unit> <name>" lines
    instructions: List[str] = field(default_factory=list)
    image: str = ""  # image URI, used as an identity hint
    category: str = ""
    tags: List[str] = field(default_factory=list)
    author: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)  # passed through unexamined

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Recipe":
        """Build a Recipe from a plain record. Unknown keys land in ``extra``."""
        return cls(
            id=str(data.get("id") or ""),
            title=str(data.get("title") or ""),
            ingredients=_as_str_list(data.get("ingredients")),
            instructions=_as_str_list(data.get("instructions")),
            image=str(data.get("image") or ""),
            category=str(data.get("category") or ""),
            tags=_as_str_list(data.get("tags")),
            author=str(data.get("author") or ""),
            extra={k: v for k, v in data.items() if k not in _KNOWN_FIELDS},
        )

    def to_dict(self) -> Dict[str, Any]:
        d = {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "image": self.image,
            "ingredients": list(self.ingredients),
            "instructions": list(self.instructions),
            "tags": list(self.tags),
            "author": self.author,
        }
        d.update(self.extra)
        return d


@dataclass(frozen=True)
class SimilarityThresholds:
    """Per-run similarity cutoffs, each a ratio in [0, 1]."""
    title_similarity: float = 0.8
    ingredient_similarity: float = 0.7
    instruction_similarity: float = 0.6

    def __post_init__(self):
        for name in ("title_similarity", "ingredient_similarity", "instruction_similarity"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0.0 and 1.0, got {value}")

    def replace(self, **overrides) -> "SimilarityThresholds":
        """Return a copy with some thresholds overridden (None values are ignored)."""
        return _replace(self, **{k: v for k, v in overrides.items() if v is not None})


DEFAULT_THRESHOLDS = SimilarityThresholds()


@dataclass(frozen=True)
class SimilarityScores:
    """Pairwise scores computed by the classifier.

    A score is None when the classifier decided before it needed it.
    """
    title: Optional[float] = None
    ingredients: Optional[float] = None
    instructions: Optional[float] = None

    @property
    def overall(self) -> Optional[float]:
        if self.title is None or self.ingredients is None or self.instructions is None:
            return None
        return (self.title + self.ingredients + self.instructions) / 3


@dataclass
class DuplicateVerdict:
    is_duplicate: bool
    reason: Optional[str] = None
    matched_recipe: Optional[Recipe] = None  # corpus entry that triggered the match
    rule: Optional[str] = None
    scores: Optional[SimilarityScores] = None


@dataclass
class DeduplicationResult:
    unique_recipes: List[Recipe] = field(default_factory=list)
    duplicates_removed: int = 0
    duplicate_log: List[str] = field(default_factory=list)
