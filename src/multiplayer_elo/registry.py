"""Player registry for Multiplayer ELO.

Players are kept in registration order and looked up by their
case-insensitive name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .exceptions import PlayerAlreadyExistsError, PlayerNotFoundError
from .models import STARTING_RATING, Player, canonical_name

logger = logging.getLogger(__name__)


class PlayerRegistry:
    """Ordered, case-insensitive mapping of names to players.

    Example:
        ```python
        registry = PlayerRegistry()
        registry.add("Alice")
        registry.get("ALICE").rating  # 1000
        ```
    """

    def __init__(self, starting_rating: int = STARTING_RATING):
        """Initialize an empty registry.

        Args:
            starting_rating: Rating given to new and reset players.
        """
        self.starting_rating = starting_rating
        # dicts keep insertion order, which is registration order
        self._players: dict[str, Player] = {}

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(list(self._players.values()))

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return canonical_name(name) in self._players

    def add(self, name: str) -> Player:
        """Register a new player at the starting rating.

        Args:
            name: Player name; compared case-insensitively.

        Returns:
            The newly created Player.

        Raises:
            TypeError: If the name is not a string.
            ValueError: If the name is empty.
            PlayerAlreadyExistsError: If the name is already registered.
        """
        key = canonical_name(name)
        if not key:
            raise ValueError("Player name must not be empty")
        if key in self._players:
            raise PlayerAlreadyExistsError(key)

        player = Player.create(key, self.starting_rating)
        self._players[key] = player
        logger.debug(f"Registered player '{key}' at {self.starting_rating}")
        return player

    def get(self, name: str) -> Player:
        """Look up a player by case-insensitive name.

        Raises:
            PlayerNotFoundError: If no such player is registered.
        """
        try:
            return self._players[canonical_name(name)]
        except KeyError:
            raise PlayerNotFoundError(name) from None

    def remove(self, name: str) -> None:
        """Deregister a player, keeping the order of the others.

        Raises:
            PlayerNotFoundError: If no such player is registered.
        """
        key = canonical_name(name)
        if key not in self._players:
            raise PlayerNotFoundError(name)
        del self._players[key]
        logger.debug(f"Removed player '{key}'")

    def reset(self) -> None:
        """Restore every player to the starting rating with fresh stats."""
        for player in self._players.values():
            player.reset(self.starting_rating)
        if self._players:
            logger.debug(f"Reset {len(self._players)} player(s) to {self.starting_rating}")
