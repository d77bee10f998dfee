"""
Core module for the TravelVerse Scoring Engine.

Contains the scoring logic for:
- Destination relevance (weighted rule accumulation)
- Photo-guide viral potential
- Swarm photo-spot optimization
- Interaction engagement
"""

from .exceptions import (
    ScoringError,
    InvalidProfile,
    InvalidGuide,
    InvalidInteraction,
    EmptyCandidateSet,
    NoParticipants,
)
from .models import (
    BudgetRange,
    TravelStyle,
    GuideCategory,
    Difficulty,
    Coordinates,
    TravelerProfile,
    Culture,
    TravelInfo,
    Accommodation,
    Destination,
    ScoredDestination,
    PhotoGuide,
    ScoredPhotoGuide,
    SwarmParticle,
    SpotCandidate,
    OptimizationResult,
)
from .primitives import (
    RandomSource,
    SeededRandomSource,
    SequenceRandomSource,
    clamp,
    weighted_sum,
    inject_noise,
    wrap_longitude,
    bound_position,
)
from .relevance import (
    score_destination,
    rank_destinations,
    personality_match,
    recommendation_insights,
)
from .viral import score_guide, rank_guides
from .swarm import optimize_photo_spots, photo_spot_fitness
from .engagement import InteractionAction, score_engagement

__all__ = [
    # Errors
    "ScoringError",
    "InvalidProfile",
    "InvalidGuide",
    "InvalidInteraction",
    "EmptyCandidateSet",
    "NoParticipants",
    # Records
    "BudgetRange",
    "TravelStyle",
    "GuideCategory",
    "Difficulty",
    "Coordinates",
    "TravelerProfile",
    "Culture",
    "TravelInfo",
    "Accommodation",
    "Destination",
    "ScoredDestination",
    "PhotoGuide",
    "ScoredPhotoGuide",
    "SwarmParticle",
    "SpotCandidate",
    "OptimizationResult",
    # Primitives
    "RandomSource",
    "SeededRandomSource",
    "SequenceRandomSource",
    "clamp",
    "weighted_sum",
    "inject_noise",
    "wrap_longitude",
    "bound_position",
    # Scorers
    "score_destination",
    "rank_destinations",
    "personality_match",
    "recommendation_insights",
    "score_guide",
    "rank_guides",
    "optimize_photo_spots",
    "photo_spot_fitness",
    "InteractionAction",
    "score_engagement",
]
