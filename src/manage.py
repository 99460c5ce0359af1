"""StayReviews management CLI.

The store is in memory, so each command works against a fresh domain: ``sync``
and ``metrics`` seed the sample catalogue first unless told not to.

Usage:
    python src/manage.py seed                       # Load sample properties and reviews
    python src/manage.py sync                       # Pull from Hostaway (fallback on failure)
    python src/manage.py metrics                    # Dashboard metrics
    python src/manage.py metrics --property <id>    # Metrics for one property
"""

import argparse
import json
import sys


def _print(payload):
    print(json.dumps(payload, indent=2, default=str))


def seed():
    from guest_reviews.seeding import seed_sample_data

    result = seed_sample_data()
    print(f"Seeded {result['properties']} properties and {result['reviews']} reviews.")


def sync(with_samples=True):
    from guest_reviews.review.sync import sync_reviews
    from guest_reviews.seeding import seed_sample_data

    if with_samples:
        seed_sample_data()
    result = sync_reviews()
    print(f"Imported {result['count']} reviews from {result['source']} ({result['skipped']} skipped).")
    if result.get("note"):
        print(f"  {result['note']}")


def metrics(property_id=None, portfolio=False, with_samples=True):
    from guest_reviews.analytics.metrics import dashboard_report, portfolio_report, property_report
    from guest_reviews.seeding import seed_sample_data

    if with_samples:
        seed_sample_data()

    if property_id:
        _print(property_report(property_id))
    elif portfolio:
        _print(portfolio_report())
    else:
        _print(dashboard_report())


def main():
    parser = argparse.ArgumentParser(description="StayReviews management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("seed", help="Load the sample property and review catalogue")

    sync_parser = subparsers.add_parser("sync", help="Import reviews from the Hostaway feed")
    sync_parser.add_argument("--no-samples", action="store_true", help="Skip loading sample data first")

    metrics_parser = subparsers.add_parser("metrics", help="Print review metrics as JSON")
    metrics_parser.add_argument("--property", dest="property_id", help="Metrics for a single property id")
    metrics_parser.add_argument("--portfolio", action="store_true", help="Metrics for every property")
    metrics_parser.add_argument("--no-samples", action="store_true", help="Skip loading sample data first")

    args = parser.parse_args()

    from guest_reviews.domain import guest_reviews

    guest_reviews.init()

    with guest_reviews.domain_context():
        if args.command == "seed":
            seed()
        elif args.command == "sync":
            sync(with_samples=not args.no_samples)
        elif args.command == "metrics":
            metrics(property_id=args.property_id, portfolio=args.portfolio, with_samples=not args.no_samples)
        else:
            parser.print_help()
            sys.exit(1)


if __name__ == "__main__":
    main()
