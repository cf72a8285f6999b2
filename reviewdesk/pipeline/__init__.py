"""
Filter/sort pipeline for ReviewDesk.

Derives the display sequence from the store:
- Search filter
- Rating filter
- Tag filter
- Sort
"""
