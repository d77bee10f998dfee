"""
Pydantic Response Schemas for the TravelVerse Scoring Engine.

Response models are built straight from the core records' `to_dict()`
output, so field aliases mirror the camelCase keys used there.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Any

from .requests import AccommodationModel, CoordinatesModel, CultureModel, TravelInfoModel


class ScoredDestinationResponse(BaseModel):
    """The full destination record plus its relevance score and justification."""
    id: str
    name: str
    country: str = ""
    coordinates: CoordinatesModel
    activities: List[str] = Field(default_factory=list)
    culture: Optional[CultureModel] = None
    history: str = ""
    travel_info: TravelInfoModel = Field(default_factory=TravelInfoModel, alias="travelInfo")
    accommodation: List[AccommodationModel] = Field(default_factory=list)
    photo_spot_count: int = Field(default=0, ge=0, alias="photoSpotCount")
    score: float = Field(..., ge=0.0, le=1.0, description="Relevance score")
    justification: str = Field(default="", description="Why the destination fits")
    confidence: float = Field(..., ge=0.0, le=1.0)

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "taj-mahal",
                "name": "Taj Mahal",
                "country": "India",
                "coordinates": {"lat": 27.1751, "lng": 78.0421},
                "activities": ["Heritage walks", "Photography tours"],
                "culture": {
                    "language": "Hindi",
                    "currency": "INR",
                    "traditions": ["Mughal architecture", "Marble inlay craft"],
                    "festivals": ["Taj Mahotsav"]
                },
                "history": "Built by Shah Jahan between 1632 and 1653.",
                "travelInfo": {"averageCostRange": [60, 150], "bestTimeToVisit": "October to March"},
                "accommodation": [{"name": "The Oberoi Amarvilas", "type": "Luxury Hotel", "rating": 4.9}],
                "photoSpotCount": 5,
                "score": 0.97,
                "justification": "Perfect for cultural travelers, offering rich cultural heritage with 2 traditions, 5 Instagram-worthy photo spots and average costs within your moderate range.",
                "confidence": 0.86
            }
        }


class RecommendationResponse(BaseModel):
    """Response for POST /recommendations."""
    success: bool = Field(default=True)
    recommendations: List[ScoredDestinationResponse] = Field(default_factory=list)
    insights: Dict[str, Any] = Field(default_factory=dict)
    personality_match: float = Field(default=0.75, ge=0.0, le=1.0, alias="personalityMatch")
    metadata: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        populate_by_name = True


class ScoredPhotoGuideResponse(BaseModel):
    id: str
    destination_id: str = Field(..., alias="destinationId")
    spot_name: str = Field(default="", alias="spotName")
    category: str
    difficulty: str
    image_count: int = Field(..., alias="imageCount")
    viral_potential: float = Field(..., ge=0.0, le=1.0, alias="viralPotential")

    class Config:
        populate_by_name = True


class PhotoGuideScoreResponse(BaseModel):
    """Response for POST /photo-guides/score."""
    guides: List[ScoredPhotoGuideResponse] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)


class SpotCandidateResponse(BaseModel):
    position: CoordinatesModel
    fitness: float


class SwarmOptimizationResponse(BaseModel):
    """Response for POST /swarm/photo-spots."""
    destination_id: str = Field(..., alias="destinationId")
    best_position: CoordinatesModel = Field(..., alias="bestPosition")
    best_fitness: float = Field(..., alias="bestFitness")
    alternatives: List[SpotCandidateResponse] = Field(default_factory=list)
    iterations: int
    participant_count: int = Field(..., alias="participantCount")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "destinationId": "taj-mahal",
                "bestPosition": {"lat": 27.1743, "lng": 78.0426},
                "bestFitness": 0.775,
                "alternatives": [
                    {"position": {"lat": 27.1744, "lng": 78.0423}, "fitness": 0.81}
                ],
                "iterations": 50,
                "participantCount": 1
            }
        }


class EngagementResponse(BaseModel):
    action: str
    duration: Optional[float] = None
    engagement_score: float = Field(..., ge=0.0, le=10.0, alias="engagementScore")

    class Config:
        populate_by_name = True


class HealthResponse(BaseModel):
    """
    Response model for health check endpoint.

    Attributes:
        status: Service health status
        version: API version
        components: Status of individual components
    """
    status: str = Field(default="healthy")
    version: str
    components: Dict[str, str] = Field(default_factory=dict)

    class Config:
        json_schema_extra = {
            "example": {
                "status": "healthy",
                "version": "1.0.0",
                "components": {
                    "relevance_scorer": "available",
                    "viral_scorer": "available",
                    "swarm_optimizer": "available"
                }
            }
        }


class ErrorResponse(BaseModel):
    """
    Response model for error responses.

    Attributes:
        error: Error type
        message: Human-readable error message
        details: Additional error details
    """
    error: str
    message: str
    details: Optional[Dict[str, Any]] = None
