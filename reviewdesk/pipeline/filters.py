"""
Review Filter Pipeline.

Derives the display sequence from the store contents and a FilterState:
search filter, rating filter, tag filter, then sort.
"""

import logging
from datetime import datetime
from typing import Callable, Dict, List, Tuple

from reviewdesk.models.filter_state import FilterState, validate_sort_option
from reviewdesk.models.review import Review
import config.settings as settings

logger = logging.getLogger(__name__)


def _date_key(review: Review) -> datetime:
    return datetime.strptime(review.date, settings.DATE_FORMAT)


def _rating_key(review: Review) -> float:
    return review.rating


# sort_option -> (key, descending)
SORT_KEYS: Dict[str, Tuple[Callable[[Review], object], bool]] = {
    "newest": (_date_key, True),
    "oldest": (_date_key, False),
    "highest": (_rating_key, True),
    "lowest": (_rating_key, False),
}


class ReviewFilterPipeline:
    """
    Stateless filter/sort pass over a review sequence.

    Stages run in a fixed order:
    1. Search (product, comment, author)
    2. Minimum rating
    3. Tag substring
    4. Sort (stable, ties keep store order)
    """

    def apply(self, reviews: List[Review], state: FilterState) -> List[Review]:
        """
        Produce the derived display sequence.

        Args:
            reviews: Full review sequence in store order (never mutated)
            state: Current filter/sort parameters

        Returns:
            New list containing the matching reviews in display order

        Raises:
            ValueError: If state.sort_option is unknown
        """
        result = list(reviews)

        if state.search_term:
            result = self.filter_by_search(result, state.search_term)

        if state.min_rating > 0:
            result = self.filter_by_rating(result, state.min_rating)

        if state.tag_filter:
            result = self.filter_by_tag(result, state.tag_filter)

        result = self.sort(result, state.sort_option)

        logger.debug(
            f"Derived {len(result)}/{len(reviews)} reviews "
            f"(search={state.search_term!r}, min_rating={state.min_rating}, "
            f"tag={state.tag_filter!r}, sort={state.sort_option})"
        )

        return result

    @staticmethod
    def filter_by_search(reviews: List[Review], search_term: str) -> List[Review]:
        """Keep reviews whose product, comment or author contains the term (case-insensitive)."""
        term = search_term.lower()
        return [
            r for r in reviews
            if term in r.product.lower()
            or term in r.comment.lower()
            or term in r.author.lower()
        ]

    @staticmethod
    def filter_by_rating(reviews: List[Review], min_rating: float) -> List[Review]:
        """Keep reviews rated at least min_rating."""
        return [r for r in reviews if r.rating >= min_rating]

    @staticmethod
    def filter_by_tag(reviews: List[Review], tag_filter: str) -> List[Review]:
        """Keep reviews with at least one tag containing tag_filter (case-insensitive)."""
        needle = tag_filter.lower()
        return [r for r in reviews if any(needle in tag.lower() for tag in r.tags)]

    @staticmethod
    def sort(reviews: List[Review], sort_option: str) -> List[Review]:
        """Return reviews sorted per sort_option; sorted() is stable, even with reverse=True."""
        key, descending = SORT_KEYS[validate_sort_option(sort_option)]
        return sorted(reviews, key=key, reverse=descending)


def apply_filters(reviews: List[Review], state: FilterState) -> List[Review]:
    """Pure derivation entry point for presentation layers that re-derive on every render."""
    return ReviewFilterPipeline().apply(reviews, state)


# Notes:
#
# 1. Stages run search, rating, tag, then sort. Each stage builds a new list;
#    the input sequence is never modified.
#
# 2. min_rating == 0 and empty search/tag text skip their stage entirely.
#
# 3. sorted() keeps equal elements in input order even with reverse=True,
#    so ties always fall back to store order.
