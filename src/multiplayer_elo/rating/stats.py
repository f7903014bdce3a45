"""Running statistics for players.

Folds one contest result at a time into a player's PlayerStats record.
"""

from __future__ import annotations

from ..models import RECENT_WINDOW, Player, PlayerStats


class StatsAggregator:
    """Applies contest outcomes to player statistics.

    Example:
        ```python
        aggregator = StatsAggregator(recent_window=5)
        aggregator.apply(player, position=1, delta=15)
        ```
    """

    def __init__(self, recent_window: int = RECENT_WINDOW):
        self.recent_window = recent_window

    def push_finish(self, stats: PlayerStats, position: int) -> None:
        """Append a finishing position, evicting the oldest past the window."""
        stats.recent_finishes.append(position)
        overflow = len(stats.recent_finishes) - self.recent_window
        if overflow > 0:
            del stats.recent_finishes[:overflow]

    def apply(self, player: Player, position: int, delta: int) -> None:
        """Apply one contest outcome to a player.

        Updates the rating and the most recent delta, then the stats.

        Args:
            player: The participant (mutated in place).
            position: Finishing position in the contest.
            delta: Rating change computed for the participant.
        """
        player.rating += delta
        player.rating_change = delta

        stats = player.stats
        stats.contests_played += 1
        if position == 1:
            stats.contests_won += 1
        stats.position_total += position
        self.push_finish(stats, position)
        stats.peak_rating = max(stats.peak_rating, player.rating)
