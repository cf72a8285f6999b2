"""
View export utility.

Renders the derived display sequence as a table and writes it to CSV.
"""

import logging
import os
from typing import List

import pandas as pd

from reviewdesk.models.review import Review
import config.settings as settings

logger = logging.getLogger(__name__)

# Review.to_dict() key -> table column, in column order
COLUMN_NAMES = {
    "id": "ID",
    "product": "Product",
    "author": "Author",
    "date": "Date",
    "rating": "Rating",
    "comment": "Comment",
    "tags": "Tags",
}
COLUMNS = list(COLUMN_NAMES.values())


class ViewExporter:
    """
    Tabular output for the current review view.
    Row order is display order; nothing is re-sorted here.
    """

    def to_dataframe(self, reviews: List[Review]) -> pd.DataFrame:
        """
        Build a DataFrame with one row per review.

        Args:
            reviews: Derived display sequence

        Returns:
            DataFrame with COLUMNS; empty (but with columns) when reviews is empty
        """
        rows = []
        for review in reviews:
            data = review.to_dict()
            data["tags"] = ", ".join(data["tags"])
            rows.append({column: data[key] for key, column in COLUMN_NAMES.items()})

        if not rows:
            return pd.DataFrame(columns=COLUMNS)

        return pd.DataFrame(rows, columns=COLUMNS)

    def export_csv(
        self,
        reviews: List[Review],
        output_dir: str = str(settings.OUTPUT_ROOT),
        filename: str = settings.EXPORT_FILENAME
    ) -> str:
        """
        Write the view to CSV.

        Args:
            reviews: Derived display sequence
            output_dir: Directory to save CSV output (created if missing)
            filename: CSV file name

        Returns:
            Path to the written CSV file
        """
        df = self.to_dataframe(reviews)

        os.makedirs(output_dir, exist_ok=True)
        output_path = os.path.join(output_dir, filename)

        try:
            df.to_csv(output_path, index=False)
        except OSError as e:
            logger.error(f"Failed to export reviews to {output_path}: {e}")
            raise

        logger.info(f"Exported {len(df)} reviews to {output_path}")
        return output_path
