"""
Seed reviews loaded into the store at startup.
"""

from typing import List

from reviewdesk.models.review import Review

SEED_REVIEWS = [
    {
        "id": 1,
        "author": "Jane Smith",
        "product": "Wireless Headphones",
        "rating": 4.5,
        "date": "2025-03-15",
        "comment": "Great sound quality and battery life!",
        "tags": ["electronics", "audio", "wireless"]
    },
    {
        "id": 2,
        "author": "John Doe",
        "product": "Coffee Maker",
        "rating": 3,
        "date": "2025-03-10",
        "comment": "Decent product but takes too long to brew.",
        "tags": ["appliance", "kitchen"]
    },
    {
        "id": 3,
        "author": "Sam Wilson",
        "product": "Running Shoes",
        "rating": 5,
        "date": "2025-03-20",
        "comment": "Perfect fit and very comfortable for long runs!",
        "tags": ["footwear", "sports", "running"]
    },
    {
        "id": 4,
        "author": "Alex Johnson",
        "product": "Smartphone",
        "rating": 4,
        "date": "2025-03-05",
        "comment": "Great performance but camera could be better.",
        "tags": ["electronics", "mobile", "gadget"]
    },
    {
        "id": 5,
        "author": "Taylor Reed",
        "product": "Blender",
        "rating": 2,
        "date": "2025-03-25",
        "comment": "Broke after just two months of use.",
        "tags": ["appliance", "kitchen"]
    },
]


def seed_reviews() -> List[Review]:
    """Build fresh Review objects for the seed set."""
    return [Review.from_dict(data) for data in SEED_REVIEWS]
