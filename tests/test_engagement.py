"""
Tests for interaction engagement scoring.
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from travelverse.core.engagement import InteractionAction, score_engagement
from travelverse.core.exceptions import InvalidInteraction


class TestEngagement:
    """Tests for score_engagement."""

    @pytest.mark.parametrize("action,expected", [
        ("view", 1.0),
        ("like", 2.0),
        ("save", 3.0),
        ("share", 4.0),
        ("ar_view", 5.0),
        ("vr_experience", 6.0),
    ])
    def test_base_scores(self, action, expected):
        assert score_engagement(action) == expected

    def test_long_share_boosted(self):
        assert score_engagement(InteractionAction.SHARE, 45) == pytest.approx(6.0)

    def test_long_vr_boosted(self):
        assert score_engagement("vr_experience", 60) == pytest.approx(9.0)

    def test_exactly_thirty_seconds_not_boosted(self):
        assert score_engagement("like", 30) == 2.0

    def test_never_exceeds_cap(self):
        for action in InteractionAction:
            assert score_engagement(action, 3600) <= 10.0

    def test_unknown_action(self):
        with pytest.raises(InvalidInteraction):
            score_engagement("teleport")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
