"""
Photo-Guide Viral Potential Scorer.

Predicts how shareable a photo guide is from its category, difficulty and
how many images it ships with:

    viral = clamp(0.5 + 0.2 * popular_category + 0.2 * easy + 0.1 * (images > 3), 0, 1)

Popular categories are scenic, sunset and adventure.
"""

import logging
from typing import List, Optional, Sequence

from .exceptions import InvalidGuide
from .models import Difficulty, GuideCategory, PhotoGuide, ScoredPhotoGuide
from .primitives import RandomSource, clamp

logger = logging.getLogger(__name__)

BASE_VIRAL_POTENTIAL = 0.5
POPULAR_CATEGORIES = frozenset({GuideCategory.SCENIC, GuideCategory.SUNSET, GuideCategory.ADVENTURE})
POPULAR_CATEGORY_BONUS = 0.2
EASY_BONUS = 0.2
IMAGE_RICH_BONUS = 0.1
IMAGE_RICH_THRESHOLD = 3


def score_guide(guide: PhotoGuide, rng: Optional[RandomSource] = None) -> ScoredPhotoGuide:
    """
    Compute the viral potential of a photo guide.

    Args:
        guide: Photo guide to score
        rng: Accepted for symmetry with the relevance scorer; never drawn from

    Returns:
        ScoredPhotoGuide with viral_potential in [0, 1]

    Raises:
        InvalidGuide: If category or difficulty is not a known enum value
    """
    if not isinstance(guide.category, GuideCategory):
        raise InvalidGuide(f"Invalid category: {guide.category!r}")
    if not isinstance(guide.difficulty, Difficulty):
        raise InvalidGuide(f"Invalid difficulty: {guide.difficulty!r}")

    score = BASE_VIRAL_POTENTIAL
    if guide.category in POPULAR_CATEGORIES:
        score += POPULAR_CATEGORY_BONUS
    if guide.difficulty is Difficulty.EASY:
        score += EASY_BONUS
    if guide.image_count > IMAGE_RICH_THRESHOLD:
        score += IMAGE_RICH_BONUS

    # 0.5 + 0.2 + 0.2 + 0.1 must come out as exactly 1.0
    return ScoredPhotoGuide(guide=guide, viral_potential=clamp(round(score, 6), 0.0, 1.0))


def rank_guides(
    guides: Sequence[PhotoGuide],
    rng: Optional[RandomSource] = None
) -> List[ScoredPhotoGuide]:
    """Score guides and sort by viral potential (descending, stable)."""
    scored = [score_guide(g, rng) for g in guides]
    ranked = sorted(scored, key=lambda s: s.viral_potential, reverse=True)

    logger.debug(f"Ranked {len(ranked)} photo guides")
    return ranked
