"""
Destination Relevance Scorer: Weighted Rule Accumulation.

Scores how well a destination matches a traveler profile and explains why.

Algorithm:
    score = 0.5 + sum(bonus_i for every matched rule i)
    score = clamp(score + noise(0.05), 0, 1)
    confidence = clamp(0.75 + r * 0.2, 0, 1)

Rules (evaluated in this order, which is also the order used to pick the
three explanations that make up the justification):

    culture interest      +0.20  traditions present
    adventure interest    +0.20  an activity mentions adventure (any case)
    photography interest  +0.15  more than 2 photo spots
    nature interest       +0.18  an activity mentions hiking or nature (any case)
    budget fit            +0.10  average cost upper bound within budget cap
    luxury style          +0.15  a "Luxury" accommodation type
    adventure style       +0.15  an "Adventure" activity
    cultural style        +0.15  history and culture both present

The bonuses are fixed product constants, not fitted weights.

Randomness:
    Each scored destination consumes exactly two draws from the random
    source: the noise draw first, then the confidence draw.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from .exceptions import EmptyCandidateSet, InvalidProfile
from .models import (
    BudgetRange,
    Destination,
    ScoredDestination,
    TravelerProfile,
    TravelStyle,
)
from .primitives import RandomSource, clamp, inject_noise

logger = logging.getLogger(__name__)

BASE_SCORE = 0.5
NOISE_MAGNITUDE = 0.05
CONFIDENCE_BASE = 0.75
CONFIDENCE_SPREAD = 0.2
MAX_REASONS = 3


def _any_activity(destination: Destination, *needles: str, ignore_case: bool = True) -> bool:
    """True if any activity contains any of the needles as a substring."""
    for activity in destination.activities:
        haystack = activity.lower() if ignore_case else activity
        for needle in needles:
            if (needle.lower() if ignore_case else needle) in haystack:
                return True
    return False


def _within_budget(profile: TravelerProfile, destination: Destination) -> bool:
    cap = profile.budget_range.cost_cap
    if cap is None:
        return True
    return destination.travel_info.average_cost_range[1] <= cap


@dataclass(frozen=True)
class RelevanceRule:
    """A single scoring rule: predicate, bonus, and explanation text."""
    name: str
    bonus: float
    matches: Callable[[TravelerProfile, Destination], bool]
    explain: Callable[[TravelerProfile, Destination], str]


RELEVANCE_RULES: Sequence[RelevanceRule] = (
    RelevanceRule(
        name="culture_interest",
        bonus=0.20,
        matches=lambda p, d: "culture" in p.interests
        and d.culture is not None and len(d.culture.traditions) > 0,
        explain=lambda p, d: f"rich cultural heritage with {len(d.culture.traditions)} traditions",
    ),
    RelevanceRule(
        name="adventure_interest",
        bonus=0.20,
        matches=lambda p, d: "adventure" in p.interests and _any_activity(d, "adventure"),
        explain=lambda p, d: "adventure activities to fill your days",
    ),
    RelevanceRule(
        name="photography_interest",
        bonus=0.15,
        matches=lambda p, d: "photography" in p.interests and d.photo_spot_count > 2,
        explain=lambda p, d: f"{d.photo_spot_count} Instagram-worthy photo spots",
    ),
    RelevanceRule(
        name="nature_interest",
        bonus=0.18,
        matches=lambda p, d: "nature" in p.interests and _any_activity(d, "hiking", "nature"),
        explain=lambda p, d: "hiking and nature experiences",
    ),
    RelevanceRule(
        name="budget_fit",
        bonus=0.10,
        matches=_within_budget,
        explain=lambda p, d: f"average costs within your {p.budget_range.value} range",
    ),
    RelevanceRule(
        name="luxury_style",
        bonus=0.15,
        matches=lambda p, d: p.travel_style is TravelStyle.LUXURY
        and any("Luxury" in a.type for a in d.accommodation),
        explain=lambda p, d: "premium luxury accommodations",
    ),
    RelevanceRule(
        name="adventure_style",
        bonus=0.15,
        matches=lambda p, d: p.travel_style is TravelStyle.ADVENTURE
        and _any_activity(d, "Adventure", ignore_case=False),
        explain=lambda p, d: "signature adventure experiences",
    ),
    RelevanceRule(
        name="cultural_style",
        bonus=0.15,
        matches=lambda p, d: p.travel_style is TravelStyle.CULTURAL
        and bool(d.history) and d.culture is not None,
        explain=lambda p, d: "a deep history and living culture",
    ),
)


def _validate_profile(profile: TravelerProfile) -> None:
    if not isinstance(profile.budget_range, BudgetRange):
        raise InvalidProfile(f"Invalid budgetRange: {profile.budget_range!r}")
    if not isinstance(profile.travel_style, TravelStyle):
        raise InvalidProfile(f"Invalid travelStyle: {profile.travel_style!r}")


def _join_reasons(reasons: List[str]) -> str:
    if len(reasons) == 1:
        return reasons[0]
    return ", ".join(reasons[:-1]) + " and " + reasons[-1]


def build_justification(style: TravelStyle, reasons: List[str]) -> str:
    """
    Turn matched-rule explanations into one sentence.

    Example:
        >>> build_justification(TravelStyle.CULTURAL, ["5 Instagram-worthy photo spots"])
        'Perfect for cultural travelers, offering 5 Instagram-worthy photo spots.'
    """
    if not reasons:
        return f"Great match for your {style.value} travel preferences."
    return f"Perfect for {style.value} travelers, offering {_join_reasons(reasons[:MAX_REASONS])}."


def matched_rules(profile: TravelerProfile, destination: Destination) -> List[RelevanceRule]:
    """Rules that fire for this profile/destination pair, in evaluation order."""
    return [rule for rule in RELEVANCE_RULES if rule.matches(profile, destination)]


def score_destination(
    profile: TravelerProfile,
    destination: Destination,
    rng: RandomSource,
    noise_magnitude: float = NOISE_MAGNITUDE
) -> ScoredDestination:
    """
    Score a single destination against a traveler profile.

    Args:
        profile: Traveler profile
        destination: Candidate destination
        rng: Random source (two draws consumed)
        noise_magnitude: Max perturbation of the raw score

    Returns:
        ScoredDestination with score and confidence in [0, 1]

    Raises:
        InvalidProfile: If the profile carries non-enum budget/style values
    """
    _validate_profile(profile)

    rules = matched_rules(profile, destination)
    raw_score = BASE_SCORE + sum(rule.bonus for rule in rules)

    score = clamp(inject_noise(raw_score, noise_magnitude, rng), 0.0, 1.0)
    confidence = clamp(CONFIDENCE_BASE + rng.next() * CONFIDENCE_SPREAD, 0.0, 1.0)

    reasons = [rule.explain(profile, destination) for rule in rules[:MAX_REASONS]]

    logger.debug(
        f"Scored {destination.id}: raw={raw_score:.2f}, final={score:.4f}, "
        f"rules={[r.name for r in rules]}"
    )

    return ScoredDestination(
        destination=destination,
        score=score,
        justification=build_justification(profile.travel_style, reasons),
        confidence=confidence,
    )


def rank_destinations(
    profile: TravelerProfile,
    destinations: Sequence[Destination],
    rng: RandomSource,
    noise_magnitude: float = NOISE_MAGNITUDE
) -> List[ScoredDestination]:
    """
    Score and rank candidate destinations.

    Destinations are scored in input order (so draws are consumed in input
    order), then sorted by score descending. Python's sort is stable, so
    equal scores keep their input order.

    Raises:
        InvalidProfile: On a malformed profile
        EmptyCandidateSet: If destinations is empty
    """
    _validate_profile(profile)
    if not destinations:
        raise EmptyCandidateSet("Cannot rank an empty destination list")

    scored = [score_destination(profile, d, rng, noise_magnitude) for d in destinations]
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)

    logger.info(
        f"Ranked {len(ranked)} destinations for {profile.travel_style.value} traveler "
        f"(top={ranked[0].destination.id}, score={ranked[0].score:.4f})"
    )

    return ranked


def personality_match(profile: TravelerProfile, ranked: Sequence[ScoredDestination]) -> float:
    """
    Average personality fit across ranked destinations.

    Each destination starts at 0.5 and gains 0.2 per strong trait (> 0.7)
    it caters to: adventurous/"Adventure" activity, cultural/culture present,
    relaxed/"Relaxation" activity.

    Returns:
        0.75 when the profile has no personality, 0.0 for an empty ranking
    """
    if not profile.personality:
        return 0.75
    if not ranked:
        return 0.0

    total = 0.0
    for item in ranked:
        d = item.destination
        match = 0.5
        if profile.trait("adventurous") > 0.7 and _any_activity(d, "Adventure", ignore_case=False):
            match += 0.2
        if profile.trait("cultural") > 0.7 and d.culture is not None:
            match += 0.2
        if profile.trait("relaxed") > 0.7 and _any_activity(d, "Relaxation", ignore_case=False):
            match += 0.2
        total += match

    return clamp(total / len(ranked), 0.0, 1.0)


def recommendation_insights(
    profile: TravelerProfile,
    ranked: Sequence[ScoredDestination]
) -> Dict[str, Any]:
    """Summary insights shown next to a recommendation list."""
    adventurous = profile.trait("adventurous") > 0.7
    return {
        "trendingDestinations": [item.destination.name for item in ranked[:3]],
        "budgetOptimization": (
            f"Based on your {profile.budget_range.value} spending tier, consider visiting "
            f"during shoulder season for 30% savings"
        ),
        "personalityInsights": (
            f"Your {'adventurous' if adventurous else 'relaxed'} personality suggests "
            f"{'active exploration' if adventurous else 'leisurely discovery'}"
        ),
        "timingRecommendation": "Booking 2-3 months in advance usually gives the best prices",
    }
