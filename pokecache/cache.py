"""A thread-safe Pokemon store with a fixed capacity and oldest-first eviction."""

from __future__ import annotations

import threading
from collections import deque

from .models import Pokemon


class CacheError(Exception):
    """Base class for cache errors."""


class NotFoundError(CacheError):
    """No Pokemon is stored under the requested id."""


class DuplicateIDError(CacheError):
    """A Pokemon with the same id is already stored."""


class DuplicateNameError(CacheError):
    """A Pokemon with the same name is already stored."""


class InternalCacheError(CacheError):
    """The cache's internal indexes disagree."""


class PokemonCache:
    """Pokemon indexed by name and id; when full, adding evicts the oldest insert."""

    def __init__(self, max_capacity: int) -> None:
        self._lock = threading.Lock()
        self._data: dict[str, Pokemon] = {}
        self._id_names: dict[int, str] = {}
        self._max_capacity = max_capacity
        self._insert_order: deque[str] = deque()

    @property
    def max_capacity(self) -> int:
        return self._max_capacity

    def count(self) -> int:
        with self._lock:
            return len(self._data)

    def __len__(self) -> int:
        return self.count()

    def get_by_id(self, pokemon_id: int) -> Pokemon | None:
        with self._lock:
            name = self._id_names.get(pokemon_id)
            if name is None:
                return None
            return self._data.get(name)

    def get_by_name(self, name: str) -> Pokemon | None:
        with self._lock:
            return self._data.get(name)

    def delete(self, pokemon_id: int) -> None:
        with self._lock:
            name = self._id_names.get(pokemon_id)
            if name is None:
                raise NotFoundError(f"pokemon not found with id {pokemon_id}")
            if name not in self._data:
                raise InternalCacheError(
                    f"unexpected internal error internal data missing for pokemon "
                    f"'{name}' from id {pokemon_id}"
                )
            del self._data[name]
            del self._id_names[pokemon_id]

    def add(self, pokemon: Pokemon) -> None:
        with self._lock:
            name = self._id_names.get(pokemon.id)
            if name is not None:
                raise DuplicateIDError(
                    f"duplicate pokemon id: id {pokemon.id} already in use for pokemon '{name}'"
                )
            existing = self._data.get(pokemon.name)
            if existing is not None:
                raise DuplicateNameError(
                    f"duplicate pokemon name: name '{pokemon.name}' already in use "
                    f"by pokemon id {existing.id}"
                )

            if len(self._data) == self._max_capacity:
                if not self._insert_order:
                    raise InternalCacheError(
                        "unexpected internal error: no inserted pokemon left to evict"
                    )
                oldest_name = self._insert_order.popleft()
                oldest = self._data.get(oldest_name)
                if oldest is None:
                    raise InternalCacheError(
                        f"unexpected internal error: oldest inserted pokemon name "
                        f"'{oldest_name}' not found in internal data"
                    )
                del self._data[oldest_name]
                del self._id_names[oldest.id]

            self._data[pokemon.name] = pokemon
            self._id_names[pokemon.id] = pokemon.name
            self._insert_order.append(pokemon.name)