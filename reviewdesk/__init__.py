"""
ReviewDesk - in-memory product review browser.

Holds a collection of reviews, derives a filtered and sorted view of them,
and accepts new reviews through a draft form buffer.
"""

__version__ = "1.0.0"
