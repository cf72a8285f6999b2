"""
ReviewDesk - Product Review Browser

CLI entry point: loads the seed reviews, applies filters, optionally adds
reviews and prints the resulting view.
"""

import argparse
import logging
import sys
from typing import List

from reviewdesk.browser import ReviewBrowser
from reviewdesk.models.review import Review
from reviewdesk.utils.export import ViewExporter
import config.settings as settings

DRAFT_FIELDS = ("author", "product", "rating", "comment", "tags")

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def parse_add_argument(value: str) -> dict:
    """
    Split an --add value of the form AUTHOR|PRODUCT|RATING|COMMENT[|TAGS].

    Raises:
        argparse.ArgumentTypeError: If fewer than four fields are given
    """
    parts = value.split("|", len(DRAFT_FIELDS) - 1)
    if len(parts) < 4:
        raise argparse.ArgumentTypeError(
            f"Expected AUTHOR|PRODUCT|RATING|COMMENT[|TAGS], got {value!r}"
        )
    return dict(zip(DRAFT_FIELDS, parts))


def format_review(review: Review) -> str:
    """Render a review as a text block."""
    lines = [
        f"{review.product}  [{review.rating:g} ★]",
        f"By {review.author} on {review.date}",
    ]
    if review.comment:
        lines.append(review.comment)
    if review.tags:
        lines.append(" ".join(f"#{tag}" for tag in review.tags))
    return "\n".join(lines)


def render(reviews: List[Review]) -> str:
    """Render the display sequence the way the review list shows it."""
    out = [f"Reviews ({len(reviews)})", "-" * 60]
    if not reviews:
        out.append("No reviews match your search criteria.")
    for review in reviews:
        out.append(format_review(review))
        out.append("")
    return "\n".join(out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ReviewDesk - browse, filter and add product reviews",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Reviews rated 4 stars or more, best first
  python main.py --min-rating 4 --sort highest

  # Kitchen reviews mentioning "coffee"
  python main.py --tag kitchen --search coffee

  # Add a review, then export the view
  python main.py --add "Jo|Kettle|4|Boils fast|kitchen, appliance" \\
                 --export-csv output
        """
    )

    parser.add_argument("--search", default="", help="Search product, comment and author")
    parser.add_argument(
        "--min-rating",
        type=int,
        default=0,
        choices=settings.RATING_FILTER_CHOICES,
        help="Minimum rating (default: 0 = all ratings)"
    )
    parser.add_argument("--tag", default="", help="Tag substring filter")
    parser.add_argument(
        "--sort",
        default=settings.DEFAULT_SORT_OPTION,
        choices=settings.SORT_OPTIONS,
        help=f"Sort order (default: {settings.DEFAULT_SORT_OPTION})"
    )
    parser.add_argument(
        "--add",
        action="append",
        default=[],
        type=parse_add_argument,
        metavar="AUTHOR|PRODUCT|RATING|COMMENT[|TAGS]",
        help="Submit a new review before filtering (repeatable)"
    )
    parser.add_argument("--export-csv", metavar="DIR", help="Write the view to DIR/reviews.csv")
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )
    return parser


def main(argv=None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)

    browser = ReviewBrowser()

    try:
        for fields in args.add:
            for name, value in fields.items():
                browser.update_draft_field(name, value)
            review = browser.submit_draft()
            logger.info(f"Submitted review {review.id}")

        browser.set_search_term(args.search)
        browser.set_min_rating(args.min_rating)
        browser.set_tag_filter(args.tag)
        browser.set_sort_option(args.sort)

    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        print(f"\n❌ {e}")
        return 1

    print("=" * 60)
    print("ReviewDesk - Product Reviews")
    print("=" * 60)
    print(f"Search: {browser.filters.search_term or '-'}")
    print(f"Min Rating: {browser.filters.min_rating:g}")
    print(f"Tag: {browser.filters.tag_filter or '-'}")
    print(f"Sort: {browser.filters.sort_option}")
    print("=" * 60)
    print(render(browser.display))

    if args.export_csv:
        output_path = ViewExporter().export_csv(browser.display, output_dir=args.export_csv)
        print(f"Exported: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())


# Notes:
#
# 1. Exit code 0 on success, 1 when a submitted review is rejected. argparse
#    exits with 2 on malformed arguments.
#
# 2. --add values are submitted in order before the filters are applied, so
#    new reviews take ids 6, 7, ... and go through the same filters.
