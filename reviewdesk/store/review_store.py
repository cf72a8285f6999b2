"""
Review Store - Single source of truth for reviews.

Holds the ordered review sequence and appends reviews submitted
through the draft form. There is no edit or delete.
"""

import logging
from datetime import date
from typing import Callable, Iterator, List, Optional

from reviewdesk.models.draft import DraftReview
from reviewdesk.models.review import Review
import config.settings as settings

logger = logging.getLogger(__name__)


class ReviewStore:
    """
    Append-only, in-memory sequence of reviews.

    Store order is insertion order; the pipeline never mutates it.
    """

    def __init__(
        self,
        reviews: Optional[List[Review]] = None,
        today: Callable[[], date] = date.today
    ):
        """
        Initialize store from a seed set.

        Args:
            reviews: Initial reviews in store order (ids must run 1..n)
            today: Current-date source used for undated submissions

        Raises:
            ValueError: If a seed id is not its 1-based position in the store
        """
        self.reviews: List[Review] = []
        self.today = today

        for position, review in enumerate(reviews or [], start=1):
            if review.id != position:
                raise ValueError(
                    f"Seed review id {review.id} at position {position} must be {position}"
                )
            self.reviews.append(review)

        logger.info(f"Initialized ReviewStore with {len(self.reviews)} reviews")

    def append(self, draft: DraftReview) -> Review:
        """
        Create a review from a submitted draft and add it to the end of the store.

        Args:
            draft: Completed form buffer

        Returns:
            The newly stored Review

        Raises:
            ValueError: If a required field is missing or the rating is not selected
        """
        missing = draft.missing_fields()
        if missing:
            raise ValueError(f"Missing required fields: {', '.join(missing)}")

        # Next id is count + 1; unique only because nothing is ever removed
        review_id = len(self.reviews) + 1

        review = Review(
            id=review_id,
            author=draft.author,
            product=draft.product,
            rating=draft.parse_rating(),
            date=draft.date or self.today().strftime(settings.DATE_FORMAT),
            comment=draft.comment,
            tags=draft.parse_tags()
        )

        self.reviews.append(review)
        logger.info(f"Added review {review.id} for '{review.product}' by {review.author}")

        return review

    def get_review(self, review_id: int) -> Optional[Review]:
        """Retrieve review by id. Returns None if not found."""
        for review in self.reviews:
            if review.id == review_id:
                return review
        return None

    def get_all(self) -> List[Review]:
        """Return a copy of all reviews in store order."""
        return list(self.reviews)

    def __len__(self) -> int:
        return len(self.reviews)

    def __iter__(self) -> Iterator[Review]:
        return iter(list(self.reviews))


# Notes:
#
# 1. Ids are count + 1. Seed ids must equal their 1-based position, and there
#    is no delete, so the next id is never already taken.
#
# 2. get_all() and iteration return copies of the outer list; the Review
#    objects themselves are frozen.
