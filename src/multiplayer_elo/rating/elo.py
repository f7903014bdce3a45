"""All-pairs ELO rating system for multi-participant contests.

This module generalizes the two-player ELO formula to contests with any
number of participants. A contest of N participants is decomposed into
every ordered pair of distinct participants; each pair is scored like a
two-player game and the per-pair changes are summed into one delta per
participant.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from ..exceptions import DegenerateContestError

logger = logging.getLogger(__name__)


class MultiplayerELO:
    """All-pairs ELO rating system.

    The K-factor shrinks as contests grow (``K = base_k_factor // (N - 1)``)
    so that a participant compared against N - 1 opponents moves roughly as
    far as in a two-player game.

    Example:
        ```python
        elo = MultiplayerELO()

        # Four players at 1000 finishing 1st to 4th
        elo.compute_deltas([1000, 1000, 1000, 1000], [1, 2, 3, 4])
        # [15, 5, -5, -15]
        ```
    """

    DEFAULT_BASE_K = 32
    DEFAULT_SCALE = 400.0

    def __init__(
        self,
        base_k_factor: int = DEFAULT_BASE_K,
        rating_scale: float = DEFAULT_SCALE,
    ):
        """Initialize the rating system.

        Args:
            base_k_factor: Numerator of the per-contest K-factor (default 32).
            rating_scale: Logistic divisor for expected scores (default 400).
        """
        self.base_k_factor = base_k_factor
        self.rating_scale = rating_scale

    @staticmethod
    def expected_score(
        rating_a: float,
        rating_b: float,
        scale: float = DEFAULT_SCALE,
    ) -> float:
        """Calculate expected score for player A against player B.

        Args:
            rating_a: Rating of player A.
            rating_b: Rating of player B.
            scale: Logistic divisor (default 400).

        Returns:
            Expected score between 0 and 1.

        Example:
            ```python
            MultiplayerELO.expected_score(1000, 1000)  # 0.5
            MultiplayerELO.expected_score(1200, 1000)  # ~0.76
            ```
        """
        return 1 / (1 + 10 ** ((rating_b - rating_a) / scale))

    @staticmethod
    def actual_score(position_a: int, position_b: int) -> float:
        """Score A against B: 1.0 only when A finished strictly better.

        Equal positions score 0.0 for both sides, so a tie costs both
        participants rating rather than being treated as a draw.
        """
        return 1.0 if position_a < position_b else 0.0

    @staticmethod
    def round_half_away(value: float) -> int:
        """Round to the nearest integer, halves away from zero."""
        return int(math.copysign(math.floor(abs(value) + 0.5), value))

    def k_factor(self, participants: int) -> int:
        """Per-contest K-factor for the given number of participants.

        Raises:
            DegenerateContestError: If fewer than two participants.
        """
        if participants < 2:
            raise DegenerateContestError(participants)
        return self.base_k_factor // (participants - 1)

    def pairwise_delta(
        self,
        rating_a: int,
        rating_b: int,
        position_a: int,
        position_b: int,
        k: int,
    ) -> int:
        """Rounded rating change for A from its comparison against B."""
        actual = self.actual_score(position_a, position_b)
        expected = self.expected_score(rating_a, rating_b, self.rating_scale)
        return self.round_half_away(k * (actual - expected))

    def compute_deltas(
        self,
        ratings: Sequence[int],
        positions: Sequence[int],
    ) -> list[int]:
        """Compute the rating delta of every participant in one contest.

        Every comparison reads the ratings as passed in, so the result
        does not depend on the order participants are visited in.

        Args:
            ratings: Pre-contest rating of each participant.
            positions: Finishing position of each participant, aligned
                with ``ratings``. Lower is better.

        Returns:
            One integer delta per participant, in input order.

        Raises:
            ValueError: If the sequences differ in length.
            DegenerateContestError: If fewer than two participants.
        """
        if len(ratings) != len(positions):
            raise ValueError(
                f"ratings and positions differ in length ({len(ratings)} != {len(positions)})"
            )

        snapshot = tuple(ratings)
        n = len(snapshot)
        k = self.k_factor(n)
        if k == 0:
            logger.warning(
                f"K-factor is 0 for a {n}-participant contest; ratings will not move"
            )

        deltas = []
        for i in range(n):
            total = 0
            for j in range(n):
                if i == j:
                    continue
                total += self.pairwise_delta(
                    snapshot[i], snapshot[j], positions[i], positions[j], k
                )
            deltas.append(total)

        return deltas
