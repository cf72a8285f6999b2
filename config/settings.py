"""
Configuration settings for ReviewDesk.

Centralized configuration for the review store, the filter/sort pipeline
and the command-line front end.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
OUTPUT_ROOT = Path(os.getenv("REVIEWDESK_OUTPUT_ROOT", str(PROJECT_ROOT / "output")))

# Sorting
SORT_OPTIONS = ("newest", "oldest", "highest", "lowest")
DEFAULT_SORT_OPTION = "newest"

# Rating filter choices offered to the user (0 = all ratings)
RATING_FILTER_CHOICES = (0, 1, 2, 3, 4, 5)

# Draft form
TAG_SEPARATOR = ","
RATING_PLACEHOLDER = "0"  # "Select Rating" option, counts as unselected
DATE_FORMAT = "%Y-%m-%d"

# Export
EXPORT_FILENAME = "reviews.csv"

# Logging
LOG_LEVEL = os.getenv("REVIEWDESK_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = os.getenv("REVIEWDESK_LOG_FILE", "reviewdesk.log")


# Notes:
#
# 1. RATING_FILTER_CHOICES bounds the CLI --min-rating option; library callers
#    going through coerce_min_rating() may pass any non-negative number.
#
# 2. RATING_PLACEHOLDER is the draft's unselected rating and never parses to
#    a stored rating.
