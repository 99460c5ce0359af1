"""Entry points that feed raw review payloads into ImportReviews.

``sync_reviews`` pulls from the Hostaway feed and, when the feed cannot be
used, imports the built-in fallback set instead. The result says which one
was stored through its ``source`` field.
"""

import json

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from guest_reviews.feed.hostaway import HostawayClient, UpstreamUnavailableError, parse_reviews_response
from guest_reviews.feed.samples import FALLBACK_REVIEWS
from guest_reviews.review.ingestion import FeedSource, ImportReviews
from guest_reviews.utils.logging import get_logger

logger = get_logger(__name__)

FALLBACK_NOTE = "Using fallback sample data because the review feed is unavailable"


def import_reviews(payload, source=FeedSource.UPSTREAM.value, note=None) -> dict:
    """Normalize and store an upstream-shaped payload.

    ``payload`` is a list of raw reviews or a Hostaway response envelope.
    A payload that is neither raises ``ValidationError`` and stores nothing.
    """
    try:
        items = parse_reviews_response(payload)
    except UpstreamUnavailableError as exc:
        raise ValidationError({"reviews": [exc.reason]})

    command = ImportReviews(reviews=json.dumps(items, default=str), source=source, note=note)
    return current_domain.process(command, asynchronous=False)


def fetch_feed(client: HostawayClient) -> list | None:
    """Raw reviews from the feed, or ``None`` when the feed cannot be used.

    Touches nothing but the HTTP client, so it can run off the event loop.
    """
    try:
        return client.fetch_reviews()
    except UpstreamUnavailableError as exc:
        logger.warning("feed_unavailable", reason=exc.reason, status_code=exc.status_code)
        return None


def store_feed(items: list | None) -> dict:
    """Import what ``fetch_feed`` returned, or the fallback set when it returned nothing."""
    if items is None:
        return import_reviews(FALLBACK_REVIEWS, source=FeedSource.FALLBACK.value, note=FALLBACK_NOTE)
    return import_reviews(items, source=FeedSource.UPSTREAM.value)


def sync_reviews(client: HostawayClient | None = None) -> dict:
    """Fetch reviews from the feed and store them, falling back to sample data."""
    owns_client = client is None
    client = client or HostawayClient()

    try:
        items = fetch_feed(client)
    finally:
        if owns_client:
            client.close()

    return store_feed(items)
