"""
core/ecs.py — Entity-Component-System

Entities are ints. Components are any object, stored by type.
Query by component types to get matching entities.

    w = World()
    e = w.spawn()
    w.add(e, Position(400.0, 300.0))
    w.add(e, Velocity())

    for eid, pos, vel in w.query(Position, Velocity):
        pos.x += vel.x * dt

Resources are singletons keyed by type (Camera, GameClock, ...):

    w.set_res(Camera())
    cam = w.res(Camera)
"""

from __future__ import annotations
from typing import Any, Iterator


class World:
    def __init__(self):
        self._next_id = 0
        self._stores: dict[type, dict[int, Any]] = {}
        self._dead: set[int] = set()

    # -- Entities --

    def spawn(self) -> int:
        self._next_id += 1
        return self._next_id

    def kill(self, eid: int):
        self._dead.add(eid)

    def alive(self, eid: int) -> bool:
        return 0 < eid <= self._next_id and eid not in self._dead

    def purge(self):
        """Remove dead entities from all stores. Call once per frame."""
        for store in self._stores.values():
            for eid in self._dead:
                store.pop(eid, None)
        self._dead.clear()

    # -- Components --

    def add(self, eid: int, comp: Any):
        t = type(comp)
        if t not in self._stores:
            self._stores[t] = {}
        self._stores[t][eid] = comp

    def get(self, eid: int, comp_type: type) -> Any | None:
        return self._stores.get(comp_type, {}).get(eid)

    def has(self, eid: int, comp_type: type) -> bool:
        return eid in self._stores.get(comp_type, {})

    # -- Queries --

    def query(self, *types: type) -> Iterator[tuple]:
        """Yield (eid, comp1, comp2, ...) for entities that have ALL types."""
        if not types:
            return
        # Iterate over the smallest bucket
        buckets = [(t, self._stores.get(t, {})) for t in types]
        buckets.sort(key=lambda b: len(b[1]))
        smallest = buckets[0][1]
        for eid in smallest:
            if eid < 0 or eid in self._dead:
                continue
            if all(eid in b for _, b in buckets):
                yield (eid, *(self._stores[t][eid] for t in types))

    def query_one(self, *types: type) -> tuple | None:
        """Return first match or None."""
        for result in self.query(*types):
            return result
        return None

    def all_of(self, comp_type: type) -> Iterator[tuple[int, Any]]:
        """Yield (eid, component) for every entity with this type."""
        for eid, comp in self._stores.get(comp_type, {}).items():
            if eid >= 0 and eid not in self._dead:
                yield eid, comp

    def count(self, comp_type: type) -> int:
        return sum(1 for _ in self.all_of(comp_type))

    # -- Resources (singletons, not tied to entities) --

    def set_res(self, resource: Any):
        t = type(resource)
        if t not in self._stores:
            self._stores[t] = {}
        self._stores[t][-1] = resource

    def res(self, res_type: type) -> Any | None:
        return self._stores.get(res_type, {}).get(-1)

    # -- Debug --

    def debug_dump(self) -> dict[int, list[Any]]:
        """Return {eid: [components...]} for every living entity."""
        entities: dict[int, list[Any]] = {}
        for comp_type, store in self._stores.items():
            for eid, comp in store.items():
                if eid not in self._dead and eid >= 0:
                    entities.setdefault(eid, []).append(comp)
        return entities
