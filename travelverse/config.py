"""
Configuration settings for the TravelVerse Scoring Engine.

This module defines all configuration parameters using Pydantic Settings,
enabling environment variable overrides for production deployment.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Attributes:
        APP_NAME: Application identifier
        APP_VERSION: Semantic version
        DEBUG: Enable debug mode

        # Scoring Configuration
        RECOMMENDATION_TOP_K: Destinations returned per recommendation call
        RELEVANCE_NOISE_MAGNITUDE: Max perturbation applied to relevance scores

        # Swarm Optimizer Configuration
        SWARM_ITERATIONS: Default number of drift rounds
        SWARM_ALTERNATIVE_COUNT: Default number of alternative spots
        SWARM_MAX_ITERATIONS: Upper bound accepted from API callers

        # API Configuration
        API_V1_PREFIX: API version prefix
        HOST: Server host
        PORT: Server port
    """

    # Application
    APP_NAME: str = "TravelVerse Scoring Engine"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Scoring Configuration
    RECOMMENDATION_TOP_K: int = 5
    RELEVANCE_NOISE_MAGNITUDE: float = 0.05

    # Swarm Optimizer Configuration
    SWARM_ITERATIONS: int = 50
    SWARM_ALTERNATIVE_COUNT: int = 3
    SWARM_MAX_ITERATIONS: int = 500

    # API Configuration
    API_V1_PREFIX: str = "/api/v1"
    HOST: str = "0.0.0.0"
    PORT: int = 8001

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Allow extra fields in .env


@lru_cache()
def get_settings() -> Settings:
    """
    Cached settings factory.

    Returns:
        Settings: Application configuration singleton
    """
    return Settings()


# Global settings instance
settings = get_settings()
