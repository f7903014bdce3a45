"""Tests for the reporter module."""

from datetime import datetime, timezone

import pytest

from multiplayer_elo import (
    ContestEntry,
    ContestView,
    Ledger,
    PlayerView,
    RatingDelta,
    StatsView,
    TextReporter,
    print_results,
)


@pytest.fixture
def ledger() -> Ledger:
    """Create a ledger with one recorded contest."""
    ledger = Ledger()
    for name in ["alice", "bob", "carol", "dave"]:
        ledger.add_player(name)
    ledger.record_contest(
        [("alice", 1), ("bob", 2), ("carol", 3), ("dave", 4)],
        timestamp=datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc),
    )
    return ledger


class TestTextReporterStandings:
    """Tests for TextReporter.format_standings()."""

    def test_standings(self, ledger: Ledger) -> None:
        """Test formatting a leaderboard."""
        output = TextReporter().format_standings(ledger.leaderboard())

        assert "Standings" in output
        assert "alice" in output
        assert "1015" in output
        assert "1/1" in output
        assert output.index("alice") < output.index("dave")

    def test_standings_no_contests(self) -> None:
        """Test players without contests show no average."""
        player = PlayerView(name="newbie", rating=1000)
        output = TextReporter().format_standings([player])
        assert "newbie" in output
        assert "0/0" in output

    def test_empty_standings(self) -> None:
        """Test formatting an empty leaderboard."""
        output = TextReporter().format_standings([])
        assert "(no players)" in output


class TestTextReporterContest:
    """Tests for TextReporter.format_contest()."""

    def test_contest(self, ledger: Ledger) -> None:
        """Test formatting a recorded contest."""
        output = TextReporter().format_contest(ledger.list_contests()[0])

        assert "2024-06-01" in output
        assert "Participants: 4" in output
        assert "+15" in output
        assert "-15" in output
        assert "985" in output

    def test_contest_sorted_by_position(self) -> None:
        """Test participants are listed best finish first."""
        contest = ContestView(
            timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
            results=(
                ContestEntry(player="loser", position=2),
                ContestEntry(player="winner", position=1),
            ),
            deltas=(
                RatingDelta(player="loser", delta=-16, rating=984),
                RatingDelta(player="winner", delta=16, rating=1016),
            ),
        )
        output = TextReporter().format_contest(contest)
        assert output.index("winner") < output.index("loser")


class TestTextReporterPlayer:
    """Tests for TextReporter.format_player()."""

    def test_player(self, ledger: Ledger) -> None:
        """Test formatting a player profile."""
        output = TextReporter().format_player(ledger.get_player("alice"))

        assert "Player: alice" in output
        assert "1015" in output
        assert "+15" in output
        assert "100%" in output
        assert "Recent Finishes: 1" in output

    def test_player_without_contests(self) -> None:
        """Test a profile before any contest."""
        player = PlayerView(name="newbie", rating=1000, stats=StatsView())
        output = TextReporter().format_player(player)
        assert "Recent Finishes: -" in output
        assert "0%" in output


class TestPrintResults:
    """Tests for print_results()."""

    def test_print_standings(self, ledger: Ledger, capsys: pytest.CaptureFixture) -> None:
        """Test printing a list of players."""
        print_results(ledger.leaderboard())
        assert "Standings" in capsys.readouterr().out

    def test_print_contest(self, ledger: Ledger, capsys: pytest.CaptureFixture) -> None:
        """Test printing a contest."""
        print_results(ledger.list_contests()[0])
        assert "Contest:" in capsys.readouterr().out

    def test_print_player(self, ledger: Ledger, capsys: pytest.CaptureFixture) -> None:
        """Test printing a player."""
        print_results(ledger.get_player("bob"))
        assert "Player: bob" in capsys.readouterr().out

    def test_unsupported_type(self) -> None:
        """Test unsupported objects are rejected."""
        with pytest.raises(TypeError, match="Unsupported result type"):
            print_results("not a result")
