"""
Domain records for the scoring engine.

Inputs (profiles, destinations, guides) are frozen dataclasses that validate
their enum fields on construction. Outputs (scored records, optimization
results) are produced fresh per call and serialize to camelCase dicts via
`to_dict()` so the API layer can return them unchanged.

JSON decoding lives in `travelverse.schemas`; request models build these
records through `to_domain()`.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

from .exceptions import InvalidGuide, InvalidProfile
from .primitives import bound_position


class BudgetRange(str, Enum):
    """Traveler budget tiers."""
    BUDGET = "budget"
    MODERATE = "moderate"
    LUXURY = "luxury"

    @property
    def cost_cap(self) -> Optional[float]:
        """Upper bound on a destination's average daily cost, None if unbounded."""
        return BUDGET_CAPS[self]


BUDGET_CAPS: Dict[BudgetRange, Optional[float]] = {
    BudgetRange.BUDGET: 100.0,
    BudgetRange.MODERATE: 200.0,
    BudgetRange.LUXURY: None,
}


class TravelStyle(str, Enum):
    """Traveler style chosen in the planner wizard."""
    ADVENTURE = "adventure"
    RELAXATION = "relaxation"
    CULTURAL = "cultural"
    FOODIE = "foodie"
    PHOTOGRAPHY = "photography"
    NIGHTLIFE = "nightlife"
    BALANCED = "balanced"
    LUXURY = "luxury"


class GuideCategory(str, Enum):
    """Photo guide categories."""
    SCENIC = "scenic"
    ARCHITECTURAL = "architectural"
    CULTURAL = "cultural"
    ADVENTURE = "adventure"
    FOOD = "food"
    SUNSET = "sunset"


class Difficulty(str, Enum):
    """How hard a photo spot is to reach and shoot."""
    EASY = "easy"
    MODERATE = "moderate"
    CHALLENGING = "challenging"
    EXPERT = "expert"


PERSONALITY_TRAITS = ("adventurous", "cultural", "relaxed", "social", "budgetConscious")


def _coerce(enum_cls, value, error_cls, field_name: str):
    """Convert a raw value to enum_cls or raise error_cls."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        valid = [e.value for e in enum_cls]
        raise error_cls(f"Invalid {field_name}: {value!r}. Valid: {valid}") from None


@dataclass(frozen=True)
class Coordinates:
    """Geographic coordinates in degrees."""
    lat: float
    lng: float

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class TravelerProfile:
    """
    Traveler profile built per planning session.

    Attributes:
        interests: Interest tags such as "culture", "adventure", "photography", "nature"
        budget_range: Budget tier (budget, moderate, luxury)
        travel_style: Dominant travel style
        personality: Trait name -> strength in [0, 1], stored as a read-only
                     copy of the mapping passed in

    Raises:
        InvalidProfile: On unknown budget range / travel style, an unknown
                        trait name or a trait value outside [0, 1]
    """
    interests: FrozenSet[str]
    budget_range: BudgetRange
    travel_style: TravelStyle
    personality: Mapping[str, float] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "interests", frozenset(self.interests))
        object.__setattr__(self, "personality", MappingProxyType(dict(self.personality)))
        object.__setattr__(
            self, "budget_range",
            _coerce(BudgetRange, self.budget_range, InvalidProfile, "budgetRange")
        )
        object.__setattr__(
            self, "travel_style",
            _coerce(TravelStyle, self.travel_style, InvalidProfile, "travelStyle")
        )
        for trait, value in self.personality.items():
            if trait not in PERSONALITY_TRAITS:
                raise InvalidProfile(
                    f"Unknown personality trait: {trait!r}. Valid: {list(PERSONALITY_TRAITS)}"
                )
            if not (0.0 <= value <= 1.0):
                raise InvalidProfile(f"Personality trait {trait}={value} outside [0, 1]")

    def trait(self, name: str) -> float:
        """Trait strength, 0.0 when the trait is not set."""
        return self.personality.get(name, 0.0)


@dataclass(frozen=True)
class Culture:
    """Cultural facts about a destination."""
    language: str = ""
    currency: str = ""
    traditions: Tuple[str, ...] = ()
    festivals: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.language,
            "currency": self.currency,
            "traditions": list(self.traditions),
            "festivals": list(self.festivals),
        }


@dataclass(frozen=True)
class TravelInfo:
    """Practical travel facts; costs are average daily USD."""
    average_cost_range: Tuple[float, float] = (0.0, 0.0)
    best_time_to_visit: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "averageCostRange": list(self.average_cost_range),
            "bestTimeToVisit": self.best_time_to_visit,
        }


@dataclass(frozen=True)
class Accommodation:
    type: str
    rating: float
    name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type, "rating": self.rating}


@dataclass(frozen=True)
class Destination:
    """
    Destination as served by the content store.

    Read-only input to the relevance scorer.
    """
    id: str
    name: str
    country: str
    coordinates: Coordinates
    activities: Tuple[str, ...] = ()
    culture: Optional[Culture] = None
    history: str = ""
    travel_info: TravelInfo = field(default_factory=TravelInfo)
    accommodation: Tuple[Accommodation, ...] = ()
    photo_spot_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "country": self.country,
            "coordinates": self.coordinates.to_dict(),
            "activities": list(self.activities),
            "culture": self.culture.to_dict() if self.culture else None,
            "history": self.history,
            "travelInfo": self.travel_info.to_dict(),
            "accommodation": [a.to_dict() for a in self.accommodation],
            "photoSpotCount": self.photo_spot_count,
        }


@dataclass
class ScoredDestination:
    """Destination annotated with relevance score, justification and confidence."""
    destination: Destination
    score: float
    justification: str
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        data = self.destination.to_dict()
        data.update({
            "score": round(self.score, 4),
            "justification": self.justification,
            "confidence": round(self.confidence, 4),
        })
        return data


@dataclass(frozen=True)
class PhotoGuide:
    """
    Photo guide for a spot at a destination.

    Raises:
        InvalidGuide: On unknown category / difficulty or negative image count
    """
    id: str
    destination_id: str
    category: GuideCategory
    difficulty: Difficulty
    image_count: int = 0
    spot_name: str = ""

    def __post_init__(self):
        object.__setattr__(
            self, "category",
            _coerce(GuideCategory, self.category, InvalidGuide, "category")
        )
        object.__setattr__(
            self, "difficulty",
            _coerce(Difficulty, self.difficulty, InvalidGuide, "difficulty")
        )
        if self.image_count < 0:
            raise InvalidGuide(f"imageCount must be non-negative, got {self.image_count}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "destinationId": self.destination_id,
            "spotName": self.spot_name,
            "category": self.category.value,
            "difficulty": self.difficulty.value,
            "imageCount": self.image_count,
        }


@dataclass
class ScoredPhotoGuide:
    guide: PhotoGuide
    viral_potential: float

    def to_dict(self) -> Dict[str, Any]:
        data = self.guide.to_dict()
        data["viralPotential"] = round(self.viral_potential, 4)
        return data


@dataclass
class SwarmParticle:
    """
    Transient candidate position used during one optimization call.

    Attributes:
        id: Index of the participant the particle was seeded from
        lat, lng: Current position in degrees
        d_lat, d_lng: Per-round drift in degrees
        fitness: Fitness at the current position
    """
    id: int
    lat: float
    lng: float
    d_lat: float
    d_lng: float
    fitness: float = 0.0

    @property
    def position(self) -> Coordinates:
        return Coordinates(lat=self.lat, lng=self.lng)

    def drift(self) -> None:
        """
        Advance the particle by one velocity step.

        Latitude stops at the poles and longitude wraps at the antimeridian.
        """
        self.lat, self.lng = bound_position(self.lat + self.d_lat, self.lng + self.d_lng)


@dataclass(frozen=True)
class SpotCandidate:
    position: Coordinates
    fitness: float

    def to_dict(self) -> Dict[str, Any]:
        return {"position": self.position.to_dict(), "fitness": round(self.fitness, 4)}


@dataclass
class OptimizationResult:
    """Outcome of a swarm photo-spot optimization."""
    destination_id: str
    best_position: Coordinates
    best_fitness: float
    alternatives: List[SpotCandidate] = field(default_factory=list)
    iterations: int = 0
    participant_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "destinationId": self.destination_id,
            "bestPosition": self.best_position.to_dict(),
            "bestFitness": round(self.best_fitness, 4),
            "alternatives": [a.to_dict() for a in self.alternatives],
            "iterations": self.iterations,
            "participantCount": self.participant_count,
        }
