"""
Engagement scoring for tracked user interactions.

Immersive actions (AR/VR) weigh more than passive views; interactions that
last longer than 30 seconds get a 1.5x boost. Scores are capped at 10.
"""

from enum import Enum
from typing import Dict, Optional, Union

from .exceptions import InvalidInteraction

MAX_ENGAGEMENT = 10.0
LONG_INTERACTION_SECONDS = 30
LONG_INTERACTION_MULTIPLIER = 1.5


class InteractionAction(str, Enum):
    VIEW = "view"
    LIKE = "like"
    SAVE = "save"
    SHARE = "share"
    AR_VIEW = "ar_view"
    VR_EXPERIENCE = "vr_experience"


BASE_ENGAGEMENT: Dict[InteractionAction, float] = {
    InteractionAction.VIEW: 1.0,
    InteractionAction.LIKE: 2.0,
    InteractionAction.SAVE: 3.0,
    InteractionAction.SHARE: 4.0,
    InteractionAction.AR_VIEW: 5.0,
    InteractionAction.VR_EXPERIENCE: 6.0,
}


def score_engagement(
    action: Union[InteractionAction, str],
    duration_seconds: Optional[float] = None
) -> float:
    """
    Engagement score of a single interaction.

    Unknown actions raise InvalidInteraction. This deliberately diverges
    from the web app's interaction tracker, which scored them as 1.

    Args:
        action: Interaction action
        duration_seconds: How long the interaction lasted, if known

    Raises:
        InvalidInteraction: If action is not a tracked action
    """
    try:
        action = InteractionAction(action)
    except ValueError:
        raise InvalidInteraction(f"Unknown interaction action: {action!r}") from None

    score = BASE_ENGAGEMENT[action]
    if duration_seconds and duration_seconds > LONG_INTERACTION_SECONDS:
        score *= LONG_INTERACTION_MULTIPLIER

    return min(score, MAX_ENGAGEMENT)
