"""
Review data model.

Represents a single product review held in the review store.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple

import config.settings as settings


@dataclass(frozen=True)
class Review:
    """
    A stored product review.
    Never mutated after creation; the store only appends new ones.
    """
    id: int  # Unique, assigned by the store
    author: str
    product: str
    rating: float  # Expected range (0, 5], fractional allowed
    date: str  # YYYY-MM-DD format
    comment: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)  # Lowercase, insertion order

    def __post_init__(self):
        object.__setattr__(self, "tags", tuple(self.tags))
        if not self.author.strip():
            raise ValueError("Review author must not be empty")
        if not self.product.strip():
            raise ValueError("Review product must not be empty")
        if not math.isfinite(self.rating):
            raise ValueError(f"Invalid rating: {self.rating}")
        try:
            datetime.strptime(self.date, settings.DATE_FORMAT)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid date: {self.date!r}. Must be YYYY-MM-DD")

    @classmethod
    def from_dict(cls, data: dict) -> "Review":
        """Create Review from a plain dict (seed data, JSON)."""
        return cls(
            id=int(data["id"]),
            author=data["author"],
            product=data["product"],
            rating=float(data["rating"]),
            date=data["date"],
            comment=data.get("comment", ""),
            tags=tuple(data.get("tags", ()))
        )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "id": self.id,
            "author": self.author,
            "product": self.product,
            "rating": self.rating,
            "date": self.date,
            "comment": self.comment,
            "tags": list(self.tags)
        }


# Notes:
#
# 1. Tags are stored as a tuple; whatever sequence is passed in is converted
#    in __post_init__, so a Review handed out in a derived view cannot change
#    the stored record.
#
# 2. to_dict() returns tags as a list for JSON and table output.
