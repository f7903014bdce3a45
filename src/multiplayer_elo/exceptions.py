"""Custom exceptions for Multiplayer ELO.

Every error raised by the ledger belongs to a closed set of kinds
(see ``ErrorKind``). Each exception carries its kind alongside the
context needed to act on it, and a failed operation never leaves the
ledger partially updated.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """The closed set of ledger failure kinds."""

    PLAYER_ALREADY_EXISTS = "player_already_exists"
    PLAYER_NOT_FOUND = "player_not_found"
    NO_PLAYERS = "no_players"
    MALFORMED_CONTEST = "malformed_contest"
    DEGENERATE_CONTEST = "degenerate_contest"


class EloLedgerError(Exception):
    """Base exception for all Multiplayer ELO errors."""

    kind: ErrorKind | None = None


class PlayerAlreadyExistsError(EloLedgerError):
    """A player with the same (case-insensitive) name is already registered."""

    kind = ErrorKind.PLAYER_ALREADY_EXISTS

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Player '{name}' already exists.")


class PlayerNotFoundError(EloLedgerError):
    """No player with the given name is registered.

    Raised by lookups and by ``Ledger.record_contest`` when a participant
    does not resolve against the registry.
    """

    kind = ErrorKind.PLAYER_NOT_FOUND

    def __init__(self, name: str, context: str | None = None):
        self.name = name
        self.context = context

        full_message = f"Player '{name}' not found."
        if context:
            full_message += f" {context}"
        super().__init__(full_message)


class NoPlayersError(EloLedgerError):
    """The registry is empty, so no contest can be recorded."""

    kind = ErrorKind.NO_PLAYERS

    def __init__(self, operation: str = "record_contest"):
        self.operation = operation
        message = (
            f"No players registered for '{operation}'.\n"
            f"Register participants with add_player() first."
        )
        super().__init__(message)


class MalformedContestError(EloLedgerError):
    """A contest entry is unusable.

    Raised for a null participant reference, a duplicated participant,
    or a finishing position that is not an integer.
    """

    kind = ErrorKind.MALFORMED_CONTEST

    def __init__(self, message: str, index: int | None = None):
        self.index = index

        full_message = f"Malformed contest: {message}"
        if index is not None:
            full_message += f"\nEntry index: {index}"
        full_message += "\nNot recording contest."
        super().__init__(full_message)


class DegenerateContestError(EloLedgerError):
    """Fewer than two participants were submitted."""

    kind = ErrorKind.DEGENERATE_CONTEST

    def __init__(self, participants: int, minimum: int = 2):
        self.participants = participants
        self.minimum = minimum
        message = (
            f"Contest has {participants} participant(s), but at least {minimum} "
            f"are required to compute pairwise ratings."
        )
        super().__init__(message)
