"""Multiplayer ELO - Skill ratings for contests with any number of participants.

Each contest is decomposed into every pairwise comparison between its
participants, and each participant's rating moves by the sum of their
pairwise ELO adjustments. Per-player statistics are derived from the
sequence of recorded contests.

Example:
    ```python
    from multiplayer_elo import Ledger

    ledger = Ledger()
    for name in ["alice", "bob", "carol"]:
        ledger.add_player(name)

    deltas = ledger.record_contest([("alice", 1), ("bob", 2), ("carol", 3)])
    print(ledger.get_player_rating("alice"))  # 1016
    ```
"""

from importlib.metadata import PackageNotFoundError, version

from .config import LedgerConfig
from .exceptions import (
    DegenerateContestError,
    EloLedgerError,
    ErrorKind,
    MalformedContestError,
    NoPlayersError,
    PlayerAlreadyExistsError,
    PlayerNotFoundError,
)
from .history import MatchRecorder
from .ledger import Ledger
from .rating import MultiplayerELO, StatsAggregator
from .registry import PlayerRegistry
from .reporter import TextReporter, print_results
from .models import (
    STARTING_RATING,
    Contest,
    ContestEntry,
    ContestResult,
    ContestView,
    Player,
    PlayerStats,
    PlayerView,
    RatingDelta,
    RatingPoint,
    StatsView,
)

try:
    __version__ = version("multiplayer-elo")
except PackageNotFoundError:
    __version__ = "0.0.0"  # fallback when running from a source checkout

__all__ = [
    # Main entry point
    "Ledger",
    # Configuration
    "LedgerConfig",
    # Core models
    "STARTING_RATING",
    "Player",
    "PlayerStats",
    "ContestResult",
    "Contest",
    "RatingDelta",
    "RatingPoint",
    # Views
    "PlayerView",
    "StatsView",
    "ContestView",
    "ContestEntry",
    # Components
    "PlayerRegistry",
    "MatchRecorder",
    "MultiplayerELO",
    "StatsAggregator",
    # Reporter
    "TextReporter",
    "print_results",
    # Exceptions
    "EloLedgerError",
    "ErrorKind",
    "PlayerAlreadyExistsError",
    "PlayerNotFoundError",
    "NoPlayersError",
    "MalformedContestError",
    "DegenerateContestError",
]
