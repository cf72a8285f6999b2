"""
Draft review model.

The add-review form buffer. Holds every field as entered (rating and tags
still as text) until the store parses it on submission.
"""

import math
from dataclasses import dataclass, fields
from typing import List, Optional

import config.settings as settings

REQUIRED_FIELDS = ("author", "product", "rating", "comment")


@dataclass
class DraftReview:
    """
    In-progress, not-yet-submitted review.
    """
    author: str = ""
    product: str = ""
    rating: str = settings.RATING_PLACEHOLDER  # Text until parsed
    comment: str = ""
    tags: str = ""  # Comma-separated
    date: Optional[str] = None  # YYYY-MM-DD, defaults to submission date

    def update_field(self, name: str, value) -> None:
        """
        Set a single form field.

        Args:
            name: Field name (author, product, rating, comment, tags, date)
            value: New value; stored as text (None clears the field)

        Raises:
            ValueError: If name is not a draft field
        """
        if name not in self.field_names():
            raise ValueError(f"Unknown draft field: {name}")

        if value is None:
            value = None if name == "date" else ""
        else:
            value = str(value)

        setattr(self, name, value)

    def reset(self) -> None:
        """Clear back to the empty-field defaults."""
        for f in fields(self):
            setattr(self, f.name, f.default)

    def missing_fields(self) -> List[str]:
        """Return required fields that are empty (rating: unselected or unparseable)."""
        missing = []
        for name in REQUIRED_FIELDS:
            if name == "rating":
                if self.parse_rating() is None:
                    missing.append(name)
            elif not (getattr(self, name) or "").strip():
                missing.append(name)
        return missing

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def parse_rating(self) -> Optional[float]:
        """Parse rating text; None when unselected, non-numeric or NaN."""
        text = (self.rating or "").strip()
        if not text or text == settings.RATING_PLACEHOLDER:
            return None
        try:
            rating = float(text)
        except ValueError:
            return None
        if not math.isfinite(rating) or rating <= 0:
            return None
        return rating

    def parse_tags(self) -> List[str]:
        """Split tag text on commas, trimming and lowercasing each token."""
        tokens = (self.tags or "").split(settings.TAG_SEPARATOR)
        return [token.strip().lower() for token in tokens if token.strip()]

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]
