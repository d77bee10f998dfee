"""
Pydantic Request Schemas for the TravelVerse Scoring Engine.

Wire format is camelCase (as served by the content API); Python attributes
are snake_case. Every request model converts to the core dataclasses via
`to_domain()`, so validation happens once at the boundary.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Dict, Tuple

from ..config import settings
from ..core.engagement import InteractionAction
from ..core.models import (
    Accommodation,
    BudgetRange,
    Coordinates,
    Culture,
    Destination,
    Difficulty,
    GuideCategory,
    PERSONALITY_TRAITS,
    PhotoGuide,
    TravelerProfile,
    TravelInfo,
    TravelStyle,
)


class CoordinatesModel(BaseModel):
    """Geographic coordinates with validation."""
    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees (-90 to 90)")
    lng: float = Field(..., ge=-180.0, le=180.0, description="Longitude in degrees (-180 to 180)")

    def to_domain(self) -> Coordinates:
        return Coordinates(lat=self.lat, lng=self.lng)

    class Config:
        json_schema_extra = {
            "example": {
                "lat": 27.1738,
                "lng": 78.0421
            }
        }


class TravelerProfileModel(BaseModel):
    """
    Traveler profile collected by the AI planner wizard.

    Personality traits: adventurous, cultural, relaxed, social, budgetConscious.
    """
    interests: List[str] = Field(
        default_factory=list,
        description="Interest tags: culture, adventure, photography, nature, ..."
    )
    budget_range: BudgetRange = Field(..., alias="budgetRange")
    travel_style: TravelStyle = Field(..., alias="travelStyle")
    personality: Dict[str, float] = Field(
        default_factory=dict,
        description="Trait name -> strength (0-1)"
    )

    @field_validator("personality")
    @classmethod
    def validate_traits(cls, v: Dict[str, float]) -> Dict[str, float]:
        """Validate trait names are known and strengths are within [0, 1]."""
        unknown = sorted(set(v) - set(PERSONALITY_TRAITS))
        if unknown:
            raise ValueError(f"Unknown personality traits: {unknown}. Valid: {list(PERSONALITY_TRAITS)}")
        out_of_range = {k: val for k, val in v.items() if not (0.0 <= val <= 1.0)}
        if out_of_range:
            raise ValueError(f"Personality traits outside [0, 1]: {out_of_range}")
        return v

    def to_domain(self) -> TravelerProfile:
        return TravelerProfile(
            interests=frozenset(self.interests),
            budget_range=self.budget_range,
            travel_style=self.travel_style,
            personality=dict(self.personality),
        )

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "interests": ["culture", "photography"],
                "budgetRange": "moderate",
                "travelStyle": "cultural",
                "personality": {"adventurous": 0.4, "cultural": 0.9}
            }
        }


class CultureModel(BaseModel):
    language: str = ""
    currency: str = ""
    traditions: List[str] = Field(default_factory=list)
    festivals: List[str] = Field(default_factory=list)


class TravelInfoModel(BaseModel):
    average_cost_range: Tuple[float, float] = Field(
        default=(0.0, 0.0),
        alias="averageCostRange",
        description="Average daily cost (min, max) in USD"
    )
    best_time_to_visit: str = Field(default="", alias="bestTimeToVisit")

    @field_validator("average_cost_range")
    @classmethod
    def validate_cost_range(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        if v[0] > v[1]:
            raise ValueError(f"averageCostRange min {v[0]} exceeds max {v[1]}")
        return v

    class Config:
        populate_by_name = True


class AccommodationModel(BaseModel):
    name: str = ""
    type: str
    rating: float = Field(default=0.0, ge=0.0, le=5.0)


class DestinationModel(BaseModel):
    """Destination record as served by the content API."""
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

    def to_domain(self) -> Destination:
        return Destination(
            id=self.id,
            name=self.name,
            country=self.country,
            coordinates=self.coordinates.to_domain(),
            activities=tuple(self.activities),
            culture=Culture(
                language=self.culture.language,
                currency=self.culture.currency,
                traditions=tuple(self.culture.traditions),
                festivals=tuple(self.culture.festivals),
            ) if self.culture is not None else None,
            history=self.history,
            travel_info=TravelInfo(
                average_cost_range=self.travel_info.average_cost_range,
                best_time_to_visit=self.travel_info.best_time_to_visit,
            ),
            accommodation=tuple(
                Accommodation(type=a.type, rating=a.rating, name=a.name)
                for a in self.accommodation
            ),
            photo_spot_count=self.photo_spot_count,
        )

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
                "photoSpotCount": 5
            }
        }


class RecommendationRequest(BaseModel):
    """
    Request body for POST /recommendations.

    An empty destination list is rejected with EmptyCandidateSet (422).
    """
    profile: TravelerProfileModel
    destinations: List[DestinationModel] = Field(
        default_factory=list,
        description="Candidate destinations to rank"
    )
    top_k: Optional[int] = Field(
        default=None,
        ge=1, le=50,
        alias="topK",
        description="Number of recommendations to return (default from settings)"
    )
    seed: Optional[str] = Field(
        default=None,
        description="Seed for reproducible scoring noise"
    )

    class Config:
        populate_by_name = True


class PhotoGuideModel(BaseModel):
    id: str
    destination_id: str = Field(..., alias="destinationId")
    spot_name: str = Field(default="", alias="spotName")
    category: GuideCategory
    difficulty: Difficulty
    image_count: int = Field(default=0, ge=0, alias="imageCount")

    def to_domain(self) -> PhotoGuide:
        return PhotoGuide(
            id=self.id,
            destination_id=self.destination_id,
            category=self.category,
            difficulty=self.difficulty,
            image_count=self.image_count,
            spot_name=self.spot_name,
        )

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "guide-1",
                "destinationId": "santorini",
                "spotName": "Oia Castle",
                "category": "sunset",
                "difficulty": "easy",
                "imageCount": 5
            }
        }


class PhotoGuideScoreRequest(BaseModel):
    """Request body for POST /photo-guides/score."""
    guides: List[PhotoGuideModel] = Field(default_factory=list)


class SwarmOptimizationRequest(BaseModel):
    """Request body for POST /swarm/photo-spots."""
    destination_id: str = Field(..., alias="destinationId")
    participants: List[CoordinatesModel] = Field(
        default_factory=list,
        description="Current photo-spot position of each participant"
    )
    iterations: Optional[int] = Field(
        default=None,
        ge=1, le=settings.SWARM_MAX_ITERATIONS,
        description="Drift rounds (default from settings)"
    )
    alternative_count: Optional[int] = Field(
        default=None,
        ge=0, le=20,
        alias="alternativeCount",
        description="Number of alternative spots (default from settings)"
    )
    seed: Optional[str] = Field(default=None, description="Seed for reproducible output")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "destinationId": "taj-mahal",
                "participants": [{"lat": 27.1738, "lng": 78.0421}],
                "iterations": 50,
                "alternativeCount": 3,
                "seed": "group-7"
            }
        }


class EngagementRequest(BaseModel):
    """Request body for POST /interactions/engagement."""
    action: InteractionAction
    duration: Optional[float] = Field(
        default=None,
        ge=0.0,
        description="Interaction duration in seconds"
    )
