"""Mapping between game objects and the network ids that refer to them."""

from __future__ import annotations

from typing import Any


class LinkingContext:
    """Two-way map between game objects and network ids.

    Objects are keyed by identity, so they need not be hashable. A network
    id of 0 means "no object".
    """

    def __init__(self) -> None:
        self._network_id_to_object: dict[int, Any] = {}
        self._object_to_network_id: dict[int, int] = {}

    def get_network_id(self, game_object: Any) -> int:
        """Return the object's network id, or 0 if it is not registered."""
        return self._object_to_network_id.get(id(game_object), 0)

    def get_game_object(self, network_id: int) -> Any | None:
        """Return the object registered under ``network_id``, or None."""
        return self._network_id_to_object.get(network_id)

    def add_game_object(self, game_object: Any, network_id: int) -> None:
        """Register ``game_object`` under ``network_id``, replacing older links."""
        key = id(game_object)
        old_id = self._object_to_network_id.get(key)
        if old_id is not None:
            del self._network_id_to_object[old_id]
        displaced = self._network_id_to_object.get(network_id)
        if displaced is not None:
            del self._object_to_network_id[id(displaced)]
        self._network_id_to_object[network_id] = game_object
        self._object_to_network_id[key] = network_id

    def remove_game_object(self, game_object: Any) -> None:
        """Unregister ``game_object``; raise KeyError if it is not registered."""
        key = id(game_object)
        try:
            network_id = self._object_to_network_id.pop(key)
        except KeyError:
            raise KeyError("game object is not registered") from None
        del self._network_id_to_object[network_id]