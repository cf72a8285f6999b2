"""
Filter state model.

Holds the four independent parameters the pipeline derives the
display sequence from: search term, minimum rating, tag filter and sort mode.
"""

import logging
import math
from dataclasses import dataclass

import config.settings as settings

logger = logging.getLogger(__name__)


def coerce_min_rating(value) -> float:
    """
    Parse a minimum-rating input.

    Non-numeric, NaN and negative input all mean "no filter" (0).

    Args:
        value: Raw control value (int, float or text)

    Returns:
        Minimum rating as float, 0.0 when the filter is disabled
    """
    try:
        rating = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric minimum rating {value!r}")
        return 0.0

    if math.isnan(rating) or rating < 0:
        logger.warning(f"Ignoring invalid minimum rating {value!r}")
        return 0.0

    return rating


def validate_sort_option(sort_option: str) -> str:
    """Return the sort option unchanged, or raise ValueError if unknown."""
    if sort_option not in settings.SORT_OPTIONS:
        raise ValueError(
            f"Invalid sort option: {sort_option}. "
            f"Must be one of {', '.join(settings.SORT_OPTIONS)}"
        )
    return sort_option


@dataclass
class FilterState:
    """
    Transient filter/sort parameters for the review view.
    All fields at their defaults means "show everything, newest first".
    """
    search_term: str = ""
    min_rating: float = 0.0  # 0 disables the rating filter
    tag_filter: str = ""
    sort_option: str = settings.DEFAULT_SORT_OPTION

    def __post_init__(self):
        self.min_rating = coerce_min_rating(self.min_rating)
        validate_sort_option(self.sort_option)

    def reset(self) -> None:
        """Restore every parameter to its default."""
        self.search_term = ""
        self.min_rating = 0.0
        self.tag_filter = ""
        self.sort_option = settings.DEFAULT_SORT_OPTION

    def is_default(self) -> bool:
        return (
            not self.search_term
            and self.min_rating == 0
            and not self.tag_filter
            and self.sort_option == settings.DEFAULT_SORT_OPTION
        )
