"""
Data models for ReviewDesk.

- Review: a stored product review
- FilterState: search, rating, tag and sort parameters for the view
- DraftReview: the add-review form buffer
"""
