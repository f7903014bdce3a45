"""Core data models for Multiplayer ELO.

This module defines the primary data structures used throughout the package:
- Player / PlayerStats: Mutable registry records owned by a Ledger
- ContestResult / Contest: Immutable records of a recorded contest
- RatingDelta: The rating change applied to one participant
- View types: Read-only snapshots handed to callers
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

STARTING_RATING = 1000
RECENT_WINDOW = 5


def canonical_name(name: str) -> str:
    """Return the form of a player name used for comparisons.

    Raises:
        TypeError: If the name is not a string.
    """
    if not isinstance(name, str):
        raise TypeError(f"Player name must be a string, got {type(name).__name__}")
    return name.lower()


class PlayerStats(BaseModel):
    """Running statistics for one player.

    Attributes:
        contests_played: Number of contests the player took part in.
        contests_won: Number of contests finished in position 1.
        position_total: Sum of all finishing positions.
        recent_finishes: The most recent finishing positions, oldest first.
        peak_rating: Highest rating ever held.
    """

    contests_played: int = 0
    contests_won: int = 0
    position_total: int = 0
    recent_finishes: list[int] = Field(default_factory=list)
    peak_rating: int = STARTING_RATING

    @classmethod
    def fresh(cls, starting_rating: int = STARTING_RATING) -> PlayerStats:
        """Create a zeroed record whose peak is seeded at the starting rating."""
        return cls(peak_rating=starting_rating)

    def to_view(self) -> StatsView:
        return StatsView(
            contests_played=self.contests_played,
            contests_won=self.contests_won,
            position_total=self.position_total,
            recent_finishes=tuple(self.recent_finishes),
            peak_rating=self.peak_rating,
        )


class Player(BaseModel):
    """A registered player.

    Attributes:
        name: Canonical (lowercase) player name, unique within a ledger.
        rating: Current rating.
        rating_change: Delta applied by the most recent contest.
        stats: Running statistics owned by this player.
    """

    name: str = Field(min_length=1)
    rating: int = STARTING_RATING
    rating_change: int = 0
    stats: PlayerStats = Field(default_factory=PlayerStats)

    @classmethod
    def create(cls, name: str, starting_rating: int = STARTING_RATING) -> Player:
        """Create a player at the starting rating with fresh stats."""
        return cls(
            name=canonical_name(name),
            rating=starting_rating,
            stats=PlayerStats.fresh(starting_rating),
        )

    def reset(self, starting_rating: int = STARTING_RATING) -> None:
        """Restore the starting rating and replace stats with a fresh record."""
        self.rating = starting_rating
        self.rating_change = 0
        self.stats = PlayerStats.fresh(starting_rating)

    def to_view(self) -> PlayerView:
        return PlayerView(
            name=self.name,
            rating=self.rating,
            rating_change=self.rating_change,
            stats=self.stats.to_view(),
        )


class StatsView(BaseModel):
    """Read-only snapshot of a player's statistics."""

    model_config = ConfigDict(frozen=True)

    contests_played: int = 0
    contests_won: int = 0
    position_total: int = 0
    recent_finishes: tuple[int, ...] = ()
    peak_rating: int = STARTING_RATING

    @property
    def average_finish(self) -> float:
        """All-time average finishing position (0.0 before any contest)."""
        if self.contests_played == 0:
            return 0.0
        return self.position_total / self.contests_played

    @property
    def win_rate(self) -> float:
        if self.contests_played == 0:
            return 0.0
        return self.contests_won / self.contests_played


class PlayerView(BaseModel):
    """Read-only snapshot of a player.

    Attributes:
        name: Canonical player name.
        rating: Rating at the time the view was taken.
        rating_change: Delta applied by the player's most recent contest.
        stats: Statistics snapshot.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    rating: int
    rating_change: int = 0
    stats: StatsView = Field(default_factory=StatsView)


class ContestResult(BaseModel):
    """One participant's finishing position in a contest.

    The player is held by reference into the registry; lower positions
    finished better.
    """

    model_config = ConfigDict(frozen=True)

    player: Player
    position: int = Field(strict=True)


class RatingDelta(BaseModel):
    """The rating change applied to one participant of a contest.

    Attributes:
        player: Canonical name of the participant.
        delta: Signed rating change.
        rating: The participant's rating after the change.
    """

    model_config = ConfigDict(frozen=True)

    player: str
    delta: int
    rating: int


class ContestEntry(BaseModel):
    """A finishing position in a contest view, keyed by player name."""

    model_config = ConfigDict(frozen=True)

    player: str
    position: int


class ContestView(BaseModel):
    """Read-only snapshot of a recorded contest.

    Attributes:
        timestamp: When the contest was recorded.
        results: Finishing order as submitted.
        deltas: Rating changes applied, in submission order.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    results: tuple[ContestEntry, ...] = ()
    deltas: tuple[RatingDelta, ...] = ()

    @property
    def winners(self) -> list[str]:
        """Names of the participants holding the best position."""
        if not self.results:
            return []
        best = min(entry.position for entry in self.results)
        return [entry.player for entry in self.results if entry.position == best]


class Contest(BaseModel):
    """An immutable record of a recorded contest.

    Attributes:
        timestamp: When the contest was recorded.
        results: Resolved finishing order as submitted.
        deltas: Rating changes applied, in submission order.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    results: tuple[ContestResult, ...]
    deltas: tuple[RatingDelta, ...] = ()

    @property
    def participants(self) -> list[str]:
        return [result.player.name for result in self.results]

    def to_view(self) -> ContestView:
        return ContestView(
            timestamp=self.timestamp,
            results=tuple(
                ContestEntry(player=result.player.name, position=result.position)
                for result in self.results
            ),
            deltas=self.deltas,
        )


class RatingPoint(BaseModel):
    """A player's rating at one point in time.

    Attributes:
        timestamp: When the rating took effect (None for the starting point).
        rating: The rating value.
        delta: Change applied at this point.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: datetime | None = None
    rating: int
    delta: int = 0
