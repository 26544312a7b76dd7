"""Theoretical score bounds derived from the game mechanics.

The client computes the score, so the server can only reject results that
honest play cannot produce. The upper bound is derived rather than picked:

    max_targets     = ceil(round_ms / spawn_interval_ms)
    max_points      = target_points(MIN_TARGET_SIZE)
    theoretical_max = max_targets * max_points * max_combo_multiplier

and then widened by ``SCORE_BUFFER_RATIO`` and rounded up to the next
``SCORE_ROUNDING`` step. With the shipped constants (30 s round, 800 ms
spawn, 30 px smallest target worth 60, 5x combo) that is
38 * 60 * 5 = 11400 -> 14250 -> 15000.
"""

import math
from typing import Mapping, NamedTuple, Tuple

# Target sizes are drawn uniformly from [MIN_TARGET_SIZE, MAX_TARGET_SIZE) px
MIN_TARGET_SIZE = 30
MAX_TARGET_SIZE = 70

SCORE_BUFFER_RATIO = 0.25
SCORE_ROUNDING = 1000

MIN_VALID_SCORE = 0


class GameConstants(NamedTuple):
    round_duration_sec: int = 30
    spawn_interval_ms: int = 800
    max_combo_multiplier: int = 5

    @classmethod
    def from_config(cls, config: Mapping) -> 'GameConstants':
        return cls(
            round_duration_sec=int(config.get('ROUND_DURATION_SEC', 30)),
            spawn_interval_ms=int(config.get('SPAWN_INTERVAL_MS', 800)),
            max_combo_multiplier=int(config.get('MAX_COMBO_MULTIPLIER', 5)),
        )


def target_points(size: float) -> int:
    """Points awarded for hitting a target of the given size (smaller is worth more)."""
    return int(math.floor((80 - size) / 10)) * 10 + 10


def max_targets(constants: GameConstants) -> int:
    return math.ceil(constants.round_duration_sec * 1000 / constants.spawn_interval_ms)


def theoretical_max_score(constants: GameConstants) -> int:
    return max_targets(constants) * target_points(MIN_TARGET_SIZE) * constants.max_combo_multiplier


def score_bounds(constants: GameConstants = GameConstants()) -> Tuple[int, int]:
    """Return the inclusive ``(min, max)`` range of scores the validator accepts."""
    if constants.spawn_interval_ms <= 0:
        raise ValueError('spawn_interval_ms must be positive')
    buffered = theoretical_max_score(constants) * (1 + SCORE_BUFFER_RATIO)
    max_score = int(math.ceil(buffered / SCORE_ROUNDING)) * SCORE_ROUNDING
    return MIN_VALID_SCORE, max_score
