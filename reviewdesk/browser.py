"""
Review Browser.

Session object that wires the review store, the filter state, the draft form
and the filter pipeline together, and republishes the derived display
sequence after every change.
"""

import logging
from typing import Callable, List, Optional

from reviewdesk.models.draft import DraftReview
from reviewdesk.models.filter_state import FilterState, coerce_min_rating, validate_sort_option
from reviewdesk.models.review import Review
from reviewdesk.pipeline.filters import ReviewFilterPipeline
from reviewdesk.store.review_store import ReviewStore
from reviewdesk.store.seed import seed_reviews

logger = logging.getLogger(__name__)

Listener = Callable[[List[Review]], None]


class ReviewBrowser:
    """
    Handles the intents emitted by a presentation layer.

    Intents:
    set_search_term / set_min_rating / set_tag_filter / set_sort_option
    update_draft_field / submit_draft

    Every intent that changes the store or the filter state triggers a full
    recompute, after which subscribed listeners receive the new display.
    """

    def __init__(
        self,
        store: Optional[ReviewStore] = None,
        filters: Optional[FilterState] = None,
        pipeline: Optional[ReviewFilterPipeline] = None
    ):
        """
        Initialize browser.

        Args:
            store: Review store; defaults to one loaded with the seed set
            filters: Initial filter state; defaults to "all reviews, newest first"
            pipeline: Filter pipeline to derive the display with
        """
        self.store = store if store is not None else ReviewStore(seed_reviews())
        self.filters = filters if filters is not None else FilterState()
        self.pipeline = pipeline or ReviewFilterPipeline()
        self.draft = DraftReview()
        self.display: List[Review] = []
        self._listeners: List[Listener] = []

        self.recompute()

    def subscribe(self, listener: Listener) -> None:
        """Register a callback that receives every newly derived display."""
        self._listeners.append(listener)

    def recompute(self) -> List[Review]:
        """Re-derive the display sequence from scratch and notify listeners."""
        self.display = self.pipeline.apply(self.store.get_all(), self.filters)

        for listener in self._listeners:
            listener(list(self.display))

        return self.display

    # Filter intents

    def set_search_term(self, text: str) -> List[Review]:
        self.filters.search_term = text or ""
        return self.recompute()

    def set_min_rating(self, value) -> List[Review]:
        self.filters.min_rating = coerce_min_rating(value)
        return self.recompute()

    def set_tag_filter(self, text: str) -> List[Review]:
        self.filters.tag_filter = text or ""
        return self.recompute()

    def set_sort_option(self, mode: str) -> List[Review]:
        """
        Change the sort mode.

        Raises:
            ValueError: If mode is not newest, oldest, highest or lowest
        """
        self.filters.sort_option = validate_sort_option(mode)
        return self.recompute()

    def reset_filters(self) -> List[Review]:
        self.filters.reset()
        return self.recompute()

    # Draft intents

    def update_draft_field(self, name: str, value) -> None:
        self.draft.update_field(name, value)

    def reset_draft(self) -> None:
        self.draft.reset()

    def submit_draft(self) -> Review:
        """
        Append the current draft to the store.

        On success the draft is cleared and the display recomputed.
        On failure the draft is kept so the user can correct it.

        Returns:
            The newly stored Review

        Raises:
            ValueError: If the draft is missing required fields
        """
        try:
            review = self.store.append(self.draft)
        except ValueError as e:
            logger.warning(f"Draft rejected: {e}")
            raise

        self.draft.reset()
        self.recompute()

        return review


# Notes:
#
# 1. recompute() runs after every filter change and every successful
#    submission. Draft field edits do not touch the display.
#
# 2. Listeners receive a copy of the display list.
