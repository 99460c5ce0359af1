"""Client for the Hostaway reviews endpoint.

Every failure mode (connection errors, timeouts, non-2xx responses, bodies
that are not a review list) is raised as ``UpstreamUnavailableError`` so the
caller has exactly one thing to recover from.
"""

import httpx

from guest_reviews.settings import settings
from guest_reviews.utils.logging import get_logger

logger = get_logger(__name__)

REVIEWS_PATH = "/reviews"


class UpstreamUnavailableError(Exception):
    """The review feed could not produce a usable list of reviews."""

    def __init__(self, reason: str, status_code: int | None = None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


def parse_reviews_response(body) -> list:
    """Pull the raw review list out of a Hostaway response body.

    Accepts either a bare list or the usual ``{"status": ..., "result": [...]}``
    envelope.
    """
    if isinstance(body, list):
        return body

    if not isinstance(body, dict):
        raise UpstreamUnavailableError(f"Unexpected response body of type {type(body).__name__}")

    if body.get("status") == "fail":
        raise UpstreamUnavailableError(f"Feed reported failure: {body.get('message') or 'no message'}")

    result = body.get("result")
    if not isinstance(result, list):
        raise UpstreamUnavailableError("Response body has no 'result' list")
    return result


class HostawayClient:
    def __init__(
        self,
        base_url: str | None = None,
        account_id: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.account_id = account_id or settings.HOSTAWAY_ACCOUNT_ID
        api_key = api_key if api_key is not None else settings.HOSTAWAY_API_KEY

        headers = {"Accept": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"

        self._client = httpx.Client(
            base_url=base_url or settings.HOSTAWAY_BASE_URL,
            headers=headers,
            timeout=httpx.Timeout(timeout or settings.HOSTAWAY_TIMEOUT_SECONDS),
            transport=transport,
        )

    def fetch_reviews(self) -> list:
        """Fetch the raw review list for the configured account."""
        try:
            response = self._client.get(REVIEWS_PATH, params={"accountId": self.account_id})
        except httpx.TimeoutException as exc:
            logger.warning("feed_timeout", error=str(exc))
            raise UpstreamUnavailableError("Timed out waiting for the review feed") from exc
        except httpx.HTTPError as exc:
            logger.warning("feed_request_failed", error=str(exc))
            raise UpstreamUnavailableError(f"Review feed request failed: {exc}") from exc

        if not response.is_success:
            logger.warning("feed_bad_status", status_code=response.status_code)
            raise UpstreamUnavailableError(
                f"Review feed answered with HTTP {response.status_code}", status_code=response.status_code
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise UpstreamUnavailableError("Review feed returned a body that is not JSON") from exc

        reviews = parse_reviews_response(body)
        logger.info("feed_fetched", count=len(reviews))
        return reviews

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
