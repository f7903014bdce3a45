"""Contest history for Multiplayer ELO.

History is append-only: contests are recorded in submission order and
never updated or removed.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from datetime import datetime, timezone

from .models import Contest, ContestResult, RatingDelta


class MatchRecorder:
    """Append-only record of contests.

    Example:
        ```python
        recorder = MatchRecorder()
        contest = recorder.record(results, deltas)
        recorder.contests  # (contest,)
        ```
    """

    def __init__(self) -> None:
        self._contests: list[Contest] = []
        # index of the first contest in each player's current rating series
        self._series_start: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._contests)

    def __iter__(self) -> Iterator[Contest]:
        return iter(tuple(self._contests))

    @property
    def contests(self) -> tuple[Contest, ...]:
        """All recorded contests, oldest first."""
        return tuple(self._contests)

    def build(
        self,
        results: Sequence[ContestResult],
        deltas: Sequence[RatingDelta] = (),
        timestamp: datetime | None = None,
    ) -> Contest:
        """Create a Contest without appending it to history.

        Args:
            results: Resolved finishing order as submitted.
            deltas: Rating changes for the contest.
            timestamp: When the contest happened (defaults to now, UTC).

        Returns:
            The validated Contest.

        Raises:
            pydantic.ValidationError: If any field is invalid.
        """
        return Contest(
            timestamp=timestamp or datetime.now(timezone.utc),
            results=tuple(results),
            deltas=tuple(deltas),
        )

    def append(self, contest: Contest) -> None:
        """Append an already-built contest to history."""
        self._contests.append(contest)

    def record(
        self,
        results: Sequence[ContestResult],
        deltas: Sequence[RatingDelta] = (),
        timestamp: datetime | None = None,
    ) -> Contest:
        """Build a contest and append it to history.

        Returns:
            The recorded Contest.
        """
        contest = self.build(results, deltas, timestamp)
        self.append(contest)
        return contest

    def start_series(self, names: Iterable[str]) -> None:
        """Start the rating series of the given players at the next contest.

        Called when players are registered or reset; contests recorded
        before this point no longer count towards their series.
        """
        for name in names:
            self._series_start[name] = len(self._contests)

    def for_player(self, name: str, since_start: bool = False) -> list[Contest]:
        """Contests a player (by canonical name) took part in, oldest first.

        Args:
            name: Canonical player name.
            since_start: Only include contests recorded after the player's
                series was last started.
        """
        start = self._series_start.get(name, 0) if since_start else 0
        return [
            contest for contest in self._contests[start:] if name in contest.participants
        ]
