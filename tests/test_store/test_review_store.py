"""
Unit tests for the Review Store.
"""

import pytest
from datetime import date
from reviewdesk.models.draft import DraftReview
from reviewdesk.models.review import Review
from reviewdesk.store.review_store import ReviewStore
from reviewdesk.store.seed import seed_reviews, SEED_REVIEWS


FIXED_TODAY = date(2025, 4, 2)


@pytest.fixture
def store():
    """Store loaded with the seed set and a fixed current date."""
    return ReviewStore(seed_reviews(), today=lambda: FIXED_TODAY)


def complete_draft(**overrides) -> DraftReview:
    draft = DraftReview(author="X", product="Y", rating="3", comment="ok", tags="a, B ,c")
    for name, value in overrides.items():
        draft.update_field(name, value)
    return draft


def test_seed_set(store):
    assert len(store) == 5
    assert [r.id for r in store] == [1, 2, 3, 4, 5]
    assert [r.rating for r in store] == [4.5, 3, 5, 4, 2]
    assert len(SEED_REVIEWS) == 5


def test_duplicate_seed_ids_rejected():
    reviews = seed_reviews()
    reviews.append(Review(id=1, author="A", product="P", rating=1, date="2025-01-01"))

    with pytest.raises(ValueError, match="position 6 must be 6"):
        ReviewStore(reviews)


def test_seed_ids_must_follow_store_order():
    """A seed set with gaps would let append hand out an id already in use."""
    review = Review(id=2, author="A", product="P", rating=3, date="2025-01-01")

    with pytest.raises(ValueError, match="Seed review id 2"):
        ReviewStore([review])


def test_ids_stay_unique_after_appends(store):
    for _ in range(3):
        store.append(complete_draft())

    ids = [r.id for r in store]
    assert len(set(ids)) == len(ids)
    assert ids == list(range(1, 9))


def test_append_submitted_draft(store):
    """Test the submission scenario: parsed rating, normalized tags, next id, today."""
    review = store.append(complete_draft())

    assert review.id == 6
    assert review.author == "X"
    assert review.product == "Y"
    assert review.rating == 3.0
    assert isinstance(review.rating, float)
    assert review.comment == "ok"
    assert review.tags == ("a", "b", "c")
    assert review.date == "2025-04-02"

    assert len(store) == 6
    assert store.get_all()[-1] is review


def test_append_increments_length_and_id(store):
    for expected_id in range(6, 10):
        before = len(store)
        review = store.append(complete_draft())
        assert len(store) == before + 1
        assert review.id == before + 1 == expected_id


def test_append_keeps_supplied_date(store):
    review = store.append(complete_draft(date="2024-12-24"))
    assert review.date == "2024-12-24"


def test_append_defaults_to_real_today():
    store = ReviewStore()
    review = store.append(complete_draft())

    assert review.id == 1
    assert review.date == date.today().isoformat()


def test_append_rejects_incomplete_draft(store):
    with pytest.raises(ValueError, match="Missing required fields: rating"):
        store.append(complete_draft(rating="0"))

    with pytest.raises(ValueError, match="author"):
        store.append(complete_draft(author=""))

    assert len(store) == 5


def test_append_rejects_bad_date(store):
    with pytest.raises(ValueError, match="Invalid date"):
        store.append(complete_draft(date="yesterday"))

    assert len(store) == 5


def test_get_all_returns_copy(store):
    reviews = store.get_all()
    reviews.clear()

    assert len(store) == 5


def test_get_review(store):
    assert store.get_review(2).product == "Coffee Maker"
    assert store.get_review(99) is None


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
