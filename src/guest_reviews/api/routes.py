"""FastAPI routes for the guest reviews context.

Each route translates between Pydantic schemas (external contract) and
Protean commands or domain queries. Filtering, moderation and metrics all
happen in the domain; nothing here decides anything.
"""

from fastapi import APIRouter, Body, Depends, Query
from fastapi.concurrency import run_in_threadpool
from protean.utils.globals import current_domain

from guest_reviews.analytics.metrics import dashboard_report, portfolio_report, property_report
from guest_reviews.api.schemas import (
    ApproveReviewRequest,
    DashboardMetricsResponse,
    ImportResultResponse,
    PropertyIdResponse,
    PropertyListingResponse,
    PropertyMetricsResponse,
    PropertyResponse,
    ReconciliationResponse,
    RegisterPropertyRequest,
    RejectReviewRequest,
    ReviewResponse,
)
from guest_reviews.feed.hostaway import HostawayClient
from guest_reviews.property.linking import property_listing, reconcile_reviews
from guest_reviews.property.property import Property
from guest_reviews.property.registration import RegisterProperty
from guest_reviews.review.filtering import query_reviews
from guest_reviews.review.moderation import ApproveReview, RejectReview
from guest_reviews.review.review import Review
from guest_reviews.review.sync import fetch_feed, import_reviews, store_feed
from guest_reviews.settings import settings

review_router = APIRouter(prefix="/reviews", tags=["reviews"])
property_router = APIRouter(prefix="/properties", tags=["properties"])
dashboard_router = APIRouter(prefix="/dashboard", tags=["dashboard"])


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------
def get_hostaway_client():
    with HostawayClient() as client:
        yield client


@review_router.get("/hostaway", response_model=ImportResultResponse)
async def fetch_hostaway_reviews(client: HostawayClient = Depends(get_hostaway_client)) -> dict:
    """Pull reviews from Hostaway, or store the fallback set if it is down."""
    # The HTTP call blocks, so it runs on a worker thread; ingestion stays on the loop
    items = await run_in_threadpool(fetch_feed, client)
    return store_feed(items)


@review_router.post("/import", response_model=ImportResultResponse)
async def import_review_payload(payload: list | dict = Body(...)) -> dict:
    """Ingest an upstream-shaped body: a review list or a ``{"result": [...]}`` envelope."""
    return import_reviews(payload)


@review_router.get("", response_model=list[ReviewResponse])
async def list_reviews(
    property: str | None = None,
    property_category: str | None = None,
    rating: str | None = None,
    categories: list[str] | None = Query(None),
    status: str | None = None,
    channel: str | None = None,
    review_type: str | None = Query(None, alias="type"),
    search: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> list[dict]:
    reviews = query_reviews(
        property=property,
        property_category=property_category,
        rating=rating,
        categories=categories,
        status=status,
        channel=channel,
        type=review_type,
        search=search,
        start_date=start_date,
        end_date=end_date,
    )
    return [review.as_canonical() for review in reviews]


@review_router.get("/reconciliation", response_model=ReconciliationResponse)
async def review_reconciliation() -> dict:
    return reconcile_reviews()


@review_router.get("/{review_id}", response_model=ReviewResponse)
async def get_review(review_id: str) -> dict:
    return current_domain.repository_for(Review).get_review_by_id(review_id).as_canonical()


@review_router.post("/{review_id}/approve", response_model=ReviewResponse)
async def approve_review(review_id: str, body: ApproveReviewRequest | None = None) -> dict:
    command = ApproveReview(review_id=review_id, approved_by=body.approved_by if body else None)
    return current_domain.process(command, asynchronous=False)


@review_router.post("/{review_id}/reject", response_model=ReviewResponse)
async def reject_review(review_id: str, body: RejectReviewRequest | None = None) -> dict:
    command = RejectReview(review_id=review_id, rejected_by=body.rejected_by if body else None)
    return current_domain.process(command, asynchronous=False)


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------
@property_router.get("", response_model=list[PropertyResponse])
async def list_properties() -> list[dict]:
    return [property_.as_dict() for property_ in current_domain.repository_for(Property).get_properties()]


@property_router.post("", status_code=201, response_model=PropertyIdResponse)
async def register_property(body: RegisterPropertyRequest) -> PropertyIdResponse:
    command = RegisterProperty(
        property_id=body.property_id,
        name=body.name,
        address=body.address,
        price=body.price,
        description=body.description,
        category=body.category,
        bedrooms=body.bedrooms,
        bathrooms=body.bathrooms,
    )
    property_id = current_domain.process(command, asynchronous=False)
    return PropertyIdResponse(property_id=property_id)


@property_router.get("/{property_id}", response_model=PropertyListingResponse)
async def get_property(property_id: str) -> dict:
    """The property with the approved reviews its public page shows."""
    return property_listing(property_id)


@property_router.get("/{property_id}/metrics", response_model=PropertyMetricsResponse)
async def get_property_metrics(property_id: str) -> dict:
    return property_report(property_id)


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------
@dashboard_router.get("/metrics", response_model=DashboardMetricsResponse)
async def get_dashboard_metrics() -> dict:
    return {**dashboard_report(), "category_labels": settings.REVIEW_CATEGORIES}


@dashboard_router.get("/properties", response_model=list[PropertyMetricsResponse])
async def get_portfolio_metrics() -> list[dict]:
    return portfolio_report()
