"""
Swarm Photo-Spot Optimizer: Simplified Particle Drift Search.

Searches around the positions reported by a group of participants for the
coordinate with the best simulated photo fitness.

This is NOT particle swarm optimization: particles never steer toward the
best position found, they drift in a straight line. After n rounds a
particle seeded at p with velocity v sits at

    p_n = p + n * v,   v = (r_lat * 0.001, r_lng * 0.001)

Every position the optimizer produces (drifted particles and alternatives)
is kept on the globe: latitude is clamped to [-90, 90] and longitude wraps
into [-180, 180). A particle that reaches a pole stays there while its
longitude keeps drifting.

Fitness Model (four draws per evaluation, in this order):
    lighting      = 0.80 + r * 0.20
    accessibility = 0.70 + r * 0.30
    crowd_penalty = r * 0.30
    aesthetic     = 0.75 + r * 0.25

    fitness = 0.3 * lighting + 0.2 * accessibility + 0.4 * aesthetic - 0.1 * crowd_penalty

Draw Order:
    1. Two velocity draws per participant (lat, then lng), in input order
    2. Four fitness draws per particle per round
    3. Per alternative: lat jitter, lng jitter, then four fitness draws

Replaying the same draw sequence reproduces the result exactly.
"""

import logging
from typing import List, Sequence

from .exceptions import NoParticipants
from .models import Coordinates, OptimizationResult, SpotCandidate, SwarmParticle
from .primitives import RandomSource, bound_position, weighted_sum

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 50
DEFAULT_ALTERNATIVE_COUNT = 3

# Degrees; ~111 m of latitude
MAX_VELOCITY = 0.001
ALTERNATIVE_JITTER = 0.001

LIGHTING_WEIGHT = 0.3
ACCESSIBILITY_WEIGHT = 0.2
AESTHETIC_WEIGHT = 0.4
CROWD_PENALTY_WEIGHT = 0.1


def photo_spot_fitness(position: Coordinates, rng: RandomSource) -> float:
    """
    Simulated photo fitness of a coordinate.

    The position does not influence the value; it is kept in the signature
    so a real lighting/crowd model can replace the simulation.
    """
    lighting = 0.8 + rng.next() * 0.2
    accessibility = 0.7 + rng.next() * 0.3
    crowd_penalty = rng.next() * 0.3
    aesthetic = 0.75 + rng.next() * 0.25

    return weighted_sum([
        (lighting, LIGHTING_WEIGHT),
        (accessibility, ACCESSIBILITY_WEIGHT),
        (aesthetic, AESTHETIC_WEIGHT),
        (crowd_penalty, -CROWD_PENALTY_WEIGHT),
    ])


def _spawn_particles(
    participant_positions: Sequence[Coordinates],
    rng: RandomSource
) -> List[SwarmParticle]:
    particles = []
    for i, position in enumerate(participant_positions):
        particles.append(SwarmParticle(
            id=i,
            lat=position.lat,
            lng=position.lng,
            d_lat=rng.next() * MAX_VELOCITY,
            d_lng=rng.next() * MAX_VELOCITY,
        ))
    return particles


def _alternative_spots(
    best: Coordinates,
    count: int,
    rng: RandomSource
) -> List[SpotCandidate]:
    alternatives = []
    for _ in range(count):
        lat = best.lat + (rng.next() - 0.5) * ALTERNATIVE_JITTER
        lng = best.lng + (rng.next() - 0.5) * ALTERNATIVE_JITTER
        position = Coordinates(*bound_position(lat, lng))
        alternatives.append(SpotCandidate(position=position, fitness=photo_spot_fitness(position, rng)))
    return alternatives


def optimize_photo_spots(
    destination_id: str,
    participant_positions: Sequence[Coordinates],
    rng: RandomSource,
    iterations: int = DEFAULT_ITERATIONS,
    alternative_count: int = DEFAULT_ALTERNATIVE_COUNT
) -> OptimizationResult:
    """
    Find the best photo spot reachable by drifting from participant positions.

    Args:
        destination_id: Destination the participants are at
        participant_positions: One coordinate per participant (not mutated)
        rng: Random source driving velocities, fitness and alternatives
        iterations: Number of drift rounds (>= 1)
        alternative_count: Number of nearby alternatives to emit (>= 0)

    Returns:
        OptimizationResult with the best position seen in any round

    Raises:
        NoParticipants: If participant_positions is empty
        ValueError: If iterations < 1 or alternative_count < 0

    Example:
        >>> rng = SequenceRandomSource([0.5])
        >>> result = optimize_photo_spots("taj-mahal", [Coordinates(27.1738, 78.0421)], rng, iterations=1)
        >>> round(result.best_position.lat, 4), round(result.best_position.lng, 4)
        (27.1743, 78.0426)
    """
    if not participant_positions:
        raise NoParticipants(f"No participant positions supplied for {destination_id}")
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")
    if alternative_count < 0:
        raise ValueError(f"alternative_count must be >= 0, got {alternative_count}")

    particles = _spawn_particles(participant_positions, rng)

    best_position = None
    best_fitness = float("-inf")

    for _ in range(iterations):
        for particle in particles:
            particle.drift()
            particle.fitness = photo_spot_fitness(particle.position, rng)

            if particle.fitness > best_fitness:
                best_fitness = particle.fitness
                best_position = particle.position

    alternatives = _alternative_spots(best_position, alternative_count, rng)

    logger.info(
        f"Swarm optimization for {destination_id}: {len(particles)} particles, "
        f"{iterations} rounds, best_fitness={best_fitness:.4f}"
    )

    return OptimizationResult(
        destination_id=destination_id,
        best_position=best_position,
        best_fitness=best_fitness,
        alternatives=alternatives,
        iterations=iterations,
        participant_count=len(particles),
    )
