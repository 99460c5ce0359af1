"""Guest Reviews bounded context — ingestion, moderation and review analytics.

Pulls guest reviews from the Hostaway reservation API, normalizes them into a
canonical Review aggregate, and lets staff approve or reject reviews for the
public listing pages. Properties are linked to reviews by listing id, or by
listing name when the upstream feed carries no id.
"""

from protean.domain import Domain

from guest_reviews.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
guest_reviews = Domain(name="guest_reviews")
