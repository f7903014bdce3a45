"""Main Ledger class for Multiplayer ELO.

This module provides the primary entry point for the package. The Ledger
owns the player registry and contest history, and orchestrates contest
processing: participants are resolved against the registry, the rating
engine computes deltas from a pre-contest snapshot, the stats aggregator
applies them, and the contest is appended to history.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .config import LedgerConfig
from .exceptions import (
    DegenerateContestError,
    MalformedContestError,
    NoPlayersError,
    PlayerNotFoundError,
)
from .history import MatchRecorder
from .models import (
    ContestResult,
    ContestView,
    Player,
    PlayerView,
    RatingDelta,
    RatingPoint,
    StatsView,
)
from .rating import MultiplayerELO, StatsAggregator
from .registry import PlayerRegistry

logger = logging.getLogger(__name__)

ContestEntryInput = ContestResult | tuple[Any, Any]


class Ledger:
    """Rating ledger for multi-participant contests.

    A Ledger is safe to share between threads: every public operation runs
    under a single lock, so a contest is applied to ratings, stats and
    history as one unit.

    Example:
        ```python
        from multiplayer_elo import Ledger

        ledger = Ledger()
        for name in ["alice", "bob", "carol", "dave"]:
            ledger.add_player(name)

        deltas = ledger.record_contest(
            [("alice", 1), ("bob", 2), ("carol", 3), ("dave", 4)]
        )
        [d.delta for d in deltas]  # [15, 5, -5, -15]
        ```
    """

    def __init__(self, config: LedgerConfig | None = None):
        """Initialize the Ledger.

        Args:
            config: Optional configuration. Uses defaults if not provided.
        """
        self.config = config or LedgerConfig()
        self.engine = MultiplayerELO(
            base_k_factor=self.config.base_k_factor,
            rating_scale=self.config.rating_scale,
        )
        self.aggregator = StatsAggregator(recent_window=self.config.recent_window)
        self._registry = PlayerRegistry(starting_rating=self.config.starting_rating)
        self._recorder = MatchRecorder()
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, path: str | Path) -> Ledger:
        """Create a Ledger from a YAML configuration file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            Ledger instance configured from the file.
        """
        return cls(config=LedgerConfig.from_yaml(path))

    def __len__(self) -> int:
        with self._lock:
            return len(self._registry)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._registry

    @property
    def player_count(self) -> int:
        with self._lock:
            return len(self._registry)

    @property
    def contest_count(self) -> int:
        with self._lock:
            return len(self._recorder)

    # ------------------------------------------------------------------
    # Player registry
    # ------------------------------------------------------------------

    def add_player(self, name: str) -> PlayerView:
        """Register a new player at the starting rating.

        Raises:
            TypeError: If the name is not a string.
            ValueError: If the name is empty.
            PlayerAlreadyExistsError: If the name is taken (case-insensitive).
        """
        with self._lock:
            player = self._registry.add(name)
            self._recorder.start_series([player.name])
            return player.to_view()

    def get_player(self, name: str) -> PlayerView:
        """Look up a player by case-insensitive name.

        Raises:
            PlayerNotFoundError: If no such player is registered.
        """
        with self._lock:
            return self._registry.get(name).to_view()

    def remove_player(self, name: str) -> None:
        """Deregister a player. Contest history is left untouched.

        Raises:
            PlayerNotFoundError: If no such player is registered.
        """
        with self._lock:
            self._registry.remove(name)

    def reset_players(self) -> None:
        """Restore every player's rating and stats. History is kept."""
        with self._lock:
            self._registry.reset()
            self._recorder.start_series(player.name for player in self._registry)

    def list_players(self) -> list[PlayerView]:
        """All players in registration order."""
        with self._lock:
            return [player.to_view() for player in self._registry]

    def get_player_stats(self, name: str) -> StatsView:
        """Statistics for one player.

        Raises:
            PlayerNotFoundError: If no such player is registered.
        """
        with self._lock:
            return self._registry.get(name).stats.to_view()

    def get_player_rating(self, name: str) -> int:
        """Current rating for one player.

        Raises:
            PlayerNotFoundError: If no such player is registered.
        """
        with self._lock:
            return self._registry.get(name).rating

    def leaderboard(self) -> list[PlayerView]:
        """All players sorted by rating, highest first.

        Equal ratings keep registration order.
        """
        with self._lock:
            players = [player.to_view() for player in self._registry]
        return sorted(players, key=lambda p: p.rating, reverse=True)

    # ------------------------------------------------------------------
    # Contests
    # ------------------------------------------------------------------

    def record_contest(
        self,
        results: Iterable[ContestEntryInput],
        timestamp: datetime | None = None,
    ) -> list[RatingDelta]:
        """Record a contest and update every participant's rating.

        Either the whole contest is applied (ratings, stats and history)
        or, on any error, nothing changes.

        Args:
            results: Finishing order as ``(player, position)`` pairs, where
                ``player`` is a name or a player object, or as
                ContestResult values. Lower positions finished better.
            timestamp: When the contest happened (defaults to now).

        Returns:
            One RatingDelta per participant, in submission order.

        Raises:
            NoPlayersError: If no players are registered.
            MalformedContestError: If an entry has no player, repeats a
                participant, has a non-integer position, or the timestamp
                is not a datetime.
            PlayerNotFoundError: If a participant is not registered.
            DegenerateContestError: If fewer than two participants.
        """
        with self._lock:
            if len(self._registry) == 0:
                raise NoPlayersError("record_contest")

            resolved = self._resolve(results)
            if len(resolved) < 2:
                raise DegenerateContestError(len(resolved))

            ratings = [result.player.rating for result in resolved]
            positions = [result.position for result in resolved]
            if len(set(positions)) < len(positions):
                logger.debug("Contest has tied positions; tied participants score 0 against each other")

            deltas = self.engine.compute_deltas(ratings, positions)

            applied = [
                RatingDelta(
                    player=result.player.name,
                    delta=delta,
                    rating=result.player.rating + delta,
                )
                for result, delta in zip(resolved, deltas)
            ]

            # build the record before any player is touched
            try:
                contest = self._recorder.build(resolved, applied, timestamp)
            except ValidationError:
                raise MalformedContestError(
                    f"timestamp must be a datetime, got {timestamp!r}"
                ) from None

            for result, delta in zip(resolved, deltas):
                self.aggregator.apply(result.player, result.position, delta)
                logger.debug(
                    f"{result.player.name}: position {result.position}, "
                    f"delta {delta:+d}, rating {result.player.rating}"
                )

            self._recorder.append(contest)
            logger.info(
                f"Recorded contest #{len(self._recorder)} with {len(resolved)} participants "
                f"(K={self.engine.k_factor(len(resolved))})"
            )
            return applied

    def list_contests(self) -> list[ContestView]:
        """All recorded contests, oldest first."""
        with self._lock:
            return [contest.to_view() for contest in self._recorder]

    def rating_history(self, name: str) -> list[RatingPoint]:
        """A player's rating over time.

        Starts with the starting rating, followed by one point per contest
        the player took part in since they were registered or last reset,
        using the rating they held right after that contest. Each point's
        rating is the previous point's rating plus its delta.

        Raises:
            PlayerNotFoundError: If no such player is registered.
        """
        with self._lock:
            player = self._registry.get(name)
            points = [RatingPoint(rating=self.config.starting_rating)]
            for contest in self._recorder.for_player(player.name, since_start=True):
                for delta in contest.deltas:
                    if delta.player == player.name:
                        points.append(
                            RatingPoint(
                                timestamp=contest.timestamp,
                                rating=delta.rating,
                                delta=delta.delta,
                            )
                        )
            return points

    def _resolve(self, results: Iterable[ContestEntryInput]) -> list[ContestResult]:
        """Resolve submitted entries against the registry without mutating it."""
        resolved: list[ContestResult] = []
        seen: set[str] = set()

        for index, entry in enumerate(results):
            if isinstance(entry, ContestResult):
                ref, position = entry.player, entry.position
            else:
                try:
                    ref, position = entry
                except (TypeError, ValueError):
                    raise MalformedContestError(
                        "each entry must be a (player, position) pair", index
                    ) from None

            if ref is None:
                raise MalformedContestError("nil player found", index)

            if isinstance(ref, str):
                name = ref
            elif isinstance(ref, (Player, PlayerView)):
                name = ref.name
            else:
                raise MalformedContestError(
                    f"unsupported player reference of type {type(ref).__name__}", index
                )

            try:
                player = self._registry.get(name)
            except PlayerNotFoundError:
                raise PlayerNotFoundError(name, context="Not recording contest.") from None

            if player.name in seen:
                raise MalformedContestError(
                    f"player '{player.name}' appears more than once", index
                )
            seen.add(player.name)

            try:
                resolved.append(ContestResult(player=player, position=position))
            except ValidationError:
                raise MalformedContestError(
                    f"position for '{player.name}' must be an integer, got {position!r}", index
                ) from None

        return resolved
