"""
Pydantic Schemas Package for the TravelVerse Scoring Engine.

This package contains all request and response models for the API.
"""

from .requests import (
    CoordinatesModel,
    TravelerProfileModel,
    DestinationModel,
    PhotoGuideModel,
    RecommendationRequest,
    PhotoGuideScoreRequest,
    SwarmOptimizationRequest,
    EngagementRequest,
)
from .responses import (
    ScoredDestinationResponse,
    RecommendationResponse,
    ScoredPhotoGuideResponse,
    PhotoGuideScoreResponse,
    SpotCandidateResponse,
    SwarmOptimizationResponse,
    EngagementResponse,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    # Requests
    "CoordinatesModel",
    "TravelerProfileModel",
    "DestinationModel",
    "PhotoGuideModel",
    "RecommendationRequest",
    "PhotoGuideScoreRequest",
    "SwarmOptimizationRequest",
    "EngagementRequest",
    # Responses
    "ScoredDestinationResponse",
    "RecommendationResponse",
    "ScoredPhotoGuideResponse",
    "PhotoGuideScoreResponse",
    "SpotCandidateResponse",
    "SwarmOptimizationResponse",
    "EngagementResponse",
    "HealthResponse",
    "ErrorResponse",
]
