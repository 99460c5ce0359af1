"""StayReviews FastAPI application.

Serves review moderation, property listings and dashboard metrics. Every
request runs inside the guest_reviews domain context, and commands are
processed synchronously so a moderation decision is visible to the next read.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers
from protean.utils.globals import current_domain

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml.
from guest_reviews.domain import guest_reviews, logger
from guest_reviews.settings import settings

guest_reviews.init()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The store is in memory, so a fresh process starts empty
    if settings.SEED_SAMPLE_DATA:
        from guest_reviews.seeding import seed_sample_data

        with guest_reviews.domain_context():
            seed_sample_data()
    logger.info("app_started", domain=guest_reviews.name, seeded=settings.SEED_SAMPLE_DATA)
    yield


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="StayReviews API",
    description="Guest review aggregation, moderation and analytics",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the guest_reviews domain context for each request."""
    with guest_reviews.domain_context():
        response = await call_next(request)
    return response


register_exception_handlers(app)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from guest_reviews.api.routes import dashboard_router, property_router, review_router  # noqa: E402

app.include_router(review_router)
app.include_router(property_router)
app.include_router(dashboard_router)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    from guest_reviews.property.property import Property
    from guest_reviews.review.review import Review

    return JSONResponse(
        content={
            "status": "ok",
            "domain": guest_reviews.name,
            "reviews": len(current_domain.repository_for(Review).get_reviews()),
            "properties": len(current_domain.repository_for(Property).get_properties()),
        }
    )
