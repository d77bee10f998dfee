"""
TravelVerse Scoring Engine Application Package.

Scoring and ranking services for the TravelVerse travel app:
- Destination relevance scoring with human-readable justifications
- Photo-guide viral potential prediction
- Swarm-style photo-spot search around participant positions
- Interaction engagement scoring
"""

__version__ = "1.0.0"
__author__ = "TravelVerse Team"
