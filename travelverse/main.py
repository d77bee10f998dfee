"""
TravelVerse Scoring Engine: FastAPI Application Entry Point.

This module exposes the scoring library over REST. It decodes JSON into
the core records, calls the scorers with a per-request random source and
maps scoring errors onto HTTP responses.

Endpoints:
    - GET  /api/v1/health: Service health check
    - POST /api/v1/recommendations: Rank destinations for a traveler profile
    - POST /api/v1/photo-guides/score: Viral potential of photo guides
    - POST /api/v1/swarm/photo-spots: Swarm photo-spot optimization
    - POST /api/v1/interactions/engagement: Engagement score of an interaction
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .core import (
    ScoringError,
    SeededRandomSource,
    optimize_photo_spots,
    personality_match,
    rank_destinations,
    rank_guides,
    recommendation_insights,
    score_engagement,
)
from .schemas import (
    RecommendationRequest,
    RecommendationResponse,
    ScoredDestinationResponse,
    PhotoGuideScoreRequest,
    PhotoGuideScoreResponse,
    ScoredPhotoGuideResponse,
    SwarmOptimizationRequest,
    SwarmOptimizationResponse,
    EngagementRequest,
    EngagementResponse,
    HealthResponse,
    ErrorResponse,
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
    ## TravelVerse Scoring Engine

    Scoring and ranking for the TravelVerse travel app:

    - **Destination Relevance**: Rule-based profile matching with justifications
    - **Viral Potential**: Shareability of photo guides
    - **Swarm Photo Spots**: Drift search around participant positions
    - **Engagement**: Weighted interaction scoring

    Pass a `seed` to get reproducible results.
    """,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _random_source(seed: Optional[str]) -> SeededRandomSource:
    """Fresh random source per request; seeded requests are reproducible."""
    return SeededRandomSource(seed)


@app.exception_handler(ScoringError)
async def scoring_error_handler(request: Request, exc: ScoringError):
    """Translate scoring validation errors into 422 responses."""
    logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(
            error=type(exc).__name__,
            message=str(exc),
            details={"path": request.url.path}
        ).model_dump()
    )


# =============================================================================
# HEALTH
# =============================================================================

@app.get(
    f"{settings.API_V1_PREFIX}/health",
    response_model=HealthResponse,
    tags=["System"],
    summary="Service health check"
)
async def health():
    return HealthResponse(
        status="healthy",
        version=settings.APP_VERSION,
        components={
            "relevance_scorer": "available",
            "viral_scorer": "available",
            "swarm_optimizer": "available",
            "engagement_scorer": "available",
        }
    )


# =============================================================================
# RECOMMENDATION ENDPOINTS
# =============================================================================

@app.post(
    f"{settings.API_V1_PREFIX}/recommendations",
    response_model=RecommendationResponse,
    responses={422: {"model": ErrorResponse}},
    tags=["Recommendations"],
    summary="Rank destinations for a traveler profile",
    description="""
    Score every candidate destination against the traveler profile and
    return the best matches, highest score first. Equal scores keep the
    order in which the destinations were submitted.
    """
)
async def get_recommendations(request: RecommendationRequest):
    """
    Destination Recommendation Endpoint.

    Args:
        request: RecommendationRequest with profile and candidate destinations

    Returns:
        RecommendationResponse with ranked destinations, insights and
        personality match
    """
    start_time = time.time()

    try:
        profile = request.profile.to_domain()
        destinations = [d.to_domain() for d in request.destinations]
        top_k = request.top_k or settings.RECOMMENDATION_TOP_K

        ranked = rank_destinations(
            profile,
            destinations,
            _random_source(request.seed),
            noise_magnitude=settings.RELEVANCE_NOISE_MAGNITUDE
        )
        top = ranked[:top_k]

        processing_time_ms = int((time.time() - start_time) * 1000)

        return RecommendationResponse(
            success=True,
            recommendations=[ScoredDestinationResponse(**item.to_dict()) for item in top],
            insights=recommendation_insights(profile, ranked),
            personality_match=personality_match(profile, ranked),
            metadata={
                "candidates_evaluated": len(destinations),
                "returned": len(top),
                "processing_time_ms": processing_time_ms,
                "seeded": request.seed is not None,
            }
        )

    except ScoringError:
        raise
    except Exception as e:
        logger.error(f"Recommendation error: {e}")
        raise HTTPException(status_code=500, detail=str(e))


# =============================================================================
# PHOTO GUIDE ENDPOINTS
# =============================================================================

@app.post(
    f"{settings.API_V1_PREFIX}/photo-guides/score",
    response_model=PhotoGuideScoreResponse,
    responses={422: {"model": ErrorResponse}},
    tags=["Photo Guides"],
    summary="Score photo guides by viral potential"
)
async def score_photo_guides(request: PhotoGuideScoreRequest):
    try:
        ranked = rank_guides([g.to_domain() for g in request.guides])

        return PhotoGuideScoreResponse(
            guides=[ScoredPhotoGuideResponse(**item.to_dict()) for item in ranked],
            metadata={"guides_scored": len(ranked)}
        )

    except ScoringError:
        raise
    except Exception as e:
        logger.error(f"Photo guide scoring error: {e}")
        raise HTTPException(status_code=500, detail=str(e))


# =============================================================================
# SWARM ENDPOINTS
# =============================================================================

@app.post(
    f"{settings.API_V1_PREFIX}/swarm/photo-spots",
    response_model=SwarmOptimizationResponse,
    responses={422: {"model": ErrorResponse}},
    tags=["Swarm"],
    summary="Find the best photo spot around participant positions",
    description="""
    Seeds one particle per participant, drifts them for a fixed number of
    rounds and returns the best spot seen together with nearby alternatives.
    """
)
async def optimize_spots(request: SwarmOptimizationRequest):
    try:
        result = optimize_photo_spots(
            request.destination_id,
            [p.to_domain() for p in request.participants],
            _random_source(request.seed),
            iterations=request.iterations or settings.SWARM_ITERATIONS,
            alternative_count=(
                request.alternative_count
                if request.alternative_count is not None
                else settings.SWARM_ALTERNATIVE_COUNT
            )
        )

        return SwarmOptimizationResponse(**result.to_dict())

    except ScoringError:
        raise
    except Exception as e:
        logger.error(f"Swarm optimization error: {e}")
        raise HTTPException(status_code=500, detail=str(e))


# =============================================================================
# INTERACTION ENDPOINTS
# =============================================================================

@app.post(
    f"{settings.API_V1_PREFIX}/interactions/engagement",
    response_model=EngagementResponse,
    responses={422: {"model": ErrorResponse}},
    tags=["Interactions"],
    summary="Engagement score of a user interaction"
)
async def engagement(request: EngagementRequest):
    score = score_engagement(request.action, request.duration)
    return EngagementResponse(
        action=request.action.value,
        duration=request.duration,
        engagement_score=score
    )
