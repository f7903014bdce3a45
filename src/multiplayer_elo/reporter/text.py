"""Text reporter for Multiplayer ELO.

Provides human-readable formatting for standings, recorded contests,
and individual player profiles.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..models import ContestView, PlayerView, RatingDelta


class TextReporter:
    """Formats ledger data as human-readable text.

    Example:
        ```python
        reporter = TextReporter()
        print(reporter.format_standings(ledger.leaderboard()))
        ```
    """

    BAR_WIDTH = 30

    @staticmethod
    def _bar(fraction: float, width: int = 30) -> str:
        """Render a simple bar chart segment."""
        fraction = min(max(fraction, 0.0), 1.0)
        filled = round(fraction * width)
        return "█" * filled + "░" * (width - filled)

    @staticmethod
    def _signed(value: int) -> str:
        return f"{value:+d}"

    def format_standings(self, players: Sequence[PlayerView]) -> str:
        """Format a ranked list of players as a leaderboard.

        Players are listed in the order given; pass ``Ledger.leaderboard()``
        for rating order.

        Args:
            players: Players to list.

        Returns:
            Formatted string.
        """
        lines = [
            "Standings",
            f"{'=' * 50}",
            f"  {'Rank':<6} {'Player':<20} {'Rating':<8} {'Peak':<8} {'W/P':<10} {'Avg'}",
            f"  {'-' * 60}",
        ]

        if not players:
            lines.append("  (no players)")
            return "\n".join(lines)

        for rank, player in enumerate(players, start=1):
            stats = player.stats
            average = f"{stats.average_finish:.2f}" if stats.contests_played else "-"
            lines.append(
                f"  {rank:<6} {player.name:<20} {player.rating:<8} {stats.peak_rating:<8} "
                f"{f'{stats.contests_won}/{stats.contests_played}':<10} {average}"
            )

        return "\n".join(lines)

    def format_contest(self, contest: ContestView) -> str:
        """Format a recorded contest with the rating change of each participant.

        Args:
            contest: The contest to format.

        Returns:
            Formatted string.
        """
        deltas: dict[str, RatingDelta] = {d.player: d for d in contest.deltas}
        lines = [
            f"Contest: {contest.timestamp.isoformat()}",
            f"{'=' * 50}",
            f"Participants: {len(contest.results)}",
            "",
        ]

        for entry in sorted(contest.results, key=lambda e: e.position):
            delta = deltas.get(entry.player)
            change = ""
            if delta is not None:
                change = f"{self._signed(delta.delta):>5s} -> {delta.rating}"
            lines.append(f"  {entry.position:>3d}. {entry.player:<20s} {change}")

        return "\n".join(lines)

    def format_player(self, player: PlayerView) -> str:
        """Format a single player's profile.

        Args:
            player: The player to format.

        Returns:
            Formatted string.
        """
        stats = player.stats
        recent = ", ".join(str(p) for p in stats.recent_finishes) or "-"
        lines = [
            f"Player: {player.name}",
            f"{'=' * 50}",
            f"Rating: {player.rating}  (last change: {self._signed(player.rating_change)})",
            f"Peak:   {stats.peak_rating}",
            f"Played: {stats.contests_played}  |  Won: {stats.contests_won}",
            f"Win Rate:       {self._bar(stats.win_rate)} {stats.win_rate:.0%}",
            f"Average Finish: {stats.average_finish:.2f}",
            f"Recent Finishes: {recent}",
        ]
        return "\n".join(lines)


def print_results(result: ContestView | PlayerView | Sequence[PlayerView]) -> None:
    """Convenience function to print formatted ledger data.

    Automatically detects the object type and prints the appropriate format.

    Args:
        result: A contest, a player, or a list of players.

    Example:
        ```python
        from multiplayer_elo import Ledger, print_results

        print_results(ledger.leaderboard())
        ```
    """
    reporter = TextReporter()

    if isinstance(result, ContestView):
        print(reporter.format_contest(result))
    elif isinstance(result, PlayerView):
        print(reporter.format_player(result))
    elif isinstance(result, (list, tuple)) and all(isinstance(p, PlayerView) for p in result):
        print(reporter.format_standings(result))
    else:
        raise TypeError(f"Unsupported result type: {type(result).__name__}")
