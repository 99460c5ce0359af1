"""Pydantic request/response schemas for the guest reviews API.

These are separate from Protean commands (anti-corruption pattern).
The API layer is the external contract; commands are internal domain concepts.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class ApproveReviewRequest(BaseModel):
    approved_by: str | None = Field(default=None, max_length=255)


class RejectReviewRequest(BaseModel):
    rejected_by: str | None = Field(default=None, max_length=255)


class RegisterPropertyRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Modern 2BR in Trendy Shoreditch",
                    "address": "29 Shoreditch Heights, London E1 6JE",
                    "description": "Two-bedroom apartment in the heart of Shoreditch.",
                    "price": 125,
                    "category": "apartment",
                    "bedrooms": 2,
                    "bathrooms": 2,
                }
            ]
        }
    }

    property_id: str | None = None
    name: str = Field(..., max_length=255)
    address: str = Field(..., max_length=500)
    price: int = Field(..., gt=0)
    description: str | None = None
    category: str | None = Field(None, max_length=50)
    bedrooms: int | None = Field(None, ge=0)
    bathrooms: int | None = Field(None, ge=0)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CategoryRatingSchema(BaseModel):
    category: str
    rating: int


class ReviewResponse(BaseModel):
    id: str
    type: str
    channel: str
    rating: float | None = None
    public_review: str = ""
    review_categories: list[CategoryRatingSchema] = []
    submitted_at: datetime
    guest_name: str
    listing_name: str
    listing_id: str | None = None
    upstream_status: str | None = None
    status: str
    approved: bool
    approved_at: datetime | None = None
    approved_by: str | None = None
    rejected: bool
    rejected_at: datetime | None = None
    rejected_by: str | None = None
    ingested_at: datetime | None = None


class SkippedItem(BaseModel):
    position: int | None = None
    review_id: str | None = None
    errors: dict


class ImportResultResponse(BaseModel):
    source: str
    count: int
    skipped: int
    skipped_items: list[SkippedItem] = []
    defaulted_submitted_at: list[str] = []
    reviews: list[ReviewResponse]
    note: str | None = None


class ReconciliationEntry(BaseModel):
    review_id: str
    listing_name: str
    listing_id: str | None = None
    property_ids: list[str] = []


class ReconciliationResponse(BaseModel):
    unmatched: list[ReconciliationEntry]
    ambiguous: list[ReconciliationEntry]


class PropertyIdResponse(BaseModel):
    property_id: str


class PropertyResponse(BaseModel):
    id: str
    name: str
    address: str
    description: str | None = None
    price: int
    category: str | None = None
    bedrooms: int | None = None
    bathrooms: int | None = None
    average_rating: float = 0.0
    review_count: int = 0


class PropertyListingResponse(PropertyResponse):
    reviews: list[ReviewResponse] = []


class TrendBucket(BaseModel):
    week: str
    start: datetime
    end: datetime
    rating: float
    count: int


class DashboardMetricsResponse(BaseModel):
    total_reviews: int
    approved_reviews: int
    pending_reviews: int
    rejected_reviews: int
    average_rating: float
    category_averages: dict[str, float]
    category_labels: dict[str, str]
    trends: list[TrendBucket]


class IssueCount(BaseModel):
    keyword: str
    count: int


class PropertyMetricsResponse(BaseModel):
    property: PropertyResponse
    total_reviews: int
    approved_reviews: int
    pending_reviews: int
    average_rating: float
    category_averages: dict[str, float]
    channel_breakdown: dict[str, int]
    trend: float
    recent_reviews: int
    common_issues: list[IssueCount]
    approval_rate: float
