"""Recurring complaint keywords in low-rated reviews."""

from collections import Counter

from guest_reviews.settings import settings


def issue_keywords_in(text: str, keywords) -> list[str]:
    """Keywords that appear in ``text``. Each counts once per review."""
    lowered = (text or "").lower()
    return [keyword for keyword in keywords if keyword in lowered]


def common_issues(reviews, keywords=None, threshold=None, limit=None) -> list[dict]:
    """Tally keywords across reviews rated at or below ``threshold``.

    Returns the ``limit`` most frequent keywords. Equal counts keep the order
    in which the keywords were first found while scanning the reviews.
    """
    keywords = list(keywords if keywords is not None else settings.ISSUE_KEYWORDS)
    threshold = settings.LOW_RATING_THRESHOLD if threshold is None else threshold
    limit = settings.TOP_ISSUES_LIMIT if limit is None else limit

    tally = Counter()
    for review in reviews:
        if (review.rating or 0) > threshold or not review.public_review:
            continue
        tally.update(issue_keywords_in(review.public_review, keywords))

    # Counter keeps insertion order and sorted() is stable
    ranked = sorted(tally.items(), key=lambda item: -item[1])
    return [{"keyword": keyword, "count": count} for keyword, count in ranked[:limit]]
