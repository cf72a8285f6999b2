"""
Unit tests for the Review Browser (intent handling and recomputation).
"""

import pytest
from datetime import date
from reviewdesk.browser import ReviewBrowser
from reviewdesk.models.draft import DraftReview
from reviewdesk.store.review_store import ReviewStore
from reviewdesk.store.seed import seed_reviews


@pytest.fixture
def browser():
    store = ReviewStore(seed_reviews(), today=lambda: date(2025, 4, 2))
    return ReviewBrowser(store=store)


def ids(reviews):
    return [r.id for r in reviews]


def fill_draft(browser, **fields):
    values = {"author": "X", "product": "Y", "rating": "3", "comment": "ok", "tags": "a, B ,c"}
    values.update(fields)
    for name, value in values.items():
        browser.update_draft_field(name, value)


def test_initial_display(browser):
    assert ids(browser.display) == [5, 3, 1, 2, 4]


def test_default_browser_uses_seed_set():
    assert len(ReviewBrowser().store) == 5


def test_filter_intents_recompute(browser):
    browser.set_min_rating(4)
    assert sorted(ids(browser.display)) == [1, 3, 4]

    browser.set_sort_option("highest")
    assert ids(browser.display) == [3, 1, 4]

    browser.set_tag_filter("electronics")
    assert ids(browser.display) == [1, 4]

    browser.set_search_term("smart")
    assert ids(browser.display) == [4]

    browser.reset_filters()
    assert ids(browser.display) == [5, 3, 1, 2, 4]
    assert browser.filters.is_default()


def test_invalid_min_rating_is_ignored(browser):
    browser.set_min_rating("four")

    assert browser.filters.min_rating == 0
    assert len(browser.display) == 5


def test_invalid_sort_option_leaves_state(browser):
    browser.set_sort_option("oldest")

    with pytest.raises(ValueError):
        browser.set_sort_option("alphabetical")

    assert browser.filters.sort_option == "oldest"
    assert ids(browser.display) == [4, 2, 1, 3, 5]


def test_submit_draft(browser):
    fill_draft(browser)
    review = browser.submit_draft()

    assert review.id == 6
    assert review.tags == ("a", "b", "c")
    assert review.rating == 3.0
    assert review.date == "2025-04-02"

    # Draft cleared, display recomputed (newest first)
    assert browser.draft == DraftReview()
    assert ids(browser.display)[0] == 6
    assert len(browser.display) == 6


def test_submitted_review_respects_active_filters(browser):
    browser.set_min_rating(4)
    fill_draft(browser, rating="3")
    browser.submit_draft()

    assert 6 not in ids(browser.display)
    assert len(browser.store) == 6


def test_failed_submit_keeps_draft(browser):
    fill_draft(browser, comment="")

    with pytest.raises(ValueError, match="comment"):
        browser.submit_draft()

    assert browser.draft.author == "X"
    assert len(browser.store) == 5


def test_reset_draft(browser):
    fill_draft(browser)
    browser.reset_draft()
    assert browser.draft == DraftReview()


def test_listeners_receive_every_recompute(browser):
    published = []
    browser.subscribe(lambda display: published.append(ids(display)))

    browser.set_search_term("coffee")
    browser.set_search_term("")
    fill_draft(browser)
    browser.submit_draft()

    assert published[0] == [2]
    assert published[1] == [5, 3, 1, 2, 4]
    assert published[2] == [6, 5, 3, 1, 2, 4]


def test_display_items_cannot_change_store(browser):
    shown = browser.display[0]

    with pytest.raises(AttributeError):
        shown.tags.append("changed")

    assert browser.store.get_review(shown.id).tags == ("appliance", "kitchen")


def test_display_is_subset_of_store(browser):
    browser.set_tag_filter("a")
    store_ids = {r.id for r in browser.store}

    assert set(ids(browser.display)) <= store_ids


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
