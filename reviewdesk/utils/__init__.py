"""
Utility modules for ReviewDesk.

Cross-cutting concerns:
- Export: tabular rendering and CSV output of the current view
"""
