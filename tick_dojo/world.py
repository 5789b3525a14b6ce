"""World - entity and component storage for one dojo session."""

from __future__ import annotations

from typing import Any, Generator, TypeVar, cast

from tick_dojo.types import DeadEntityError, EntityId

T = TypeVar("T")


class World:
    """Entities are integer ids; each component type gets its own store.

    Despawning is immediate. ``query`` snapshots its candidate ids up front
    and re-checks liveness per entity, so systems may despawn while they
    iterate without disturbing the scan.
    """

    def __init__(self) -> None:
        self._components: dict[type, dict[int, Any]] = {}
        self._next_id: int = 0
        self._alive: set[int] = set()

    def spawn(self, *components: Any) -> EntityId:
        eid = self._next_id
        self._next_id += 1
        self._alive.add(eid)
        for component in components:
            self.attach(eid, component)
        return eid

    def despawn(self, entity_id: EntityId) -> None:
        self._alive.discard(entity_id)
        for store in self._components.values():
            store.pop(entity_id, None)

    def attach(self, entity_id: EntityId, component: Any) -> None:
        if entity_id not in self._alive:
            raise DeadEntityError(
                entity_id,
                f"Cannot attach {type(component).__name__} to dead entity {entity_id}",
            )
        self._components.setdefault(type(component), {})[entity_id] = component

    def get(self, entity_id: EntityId, component_type: type[T]) -> T:
        if entity_id not in self._alive:
            raise DeadEntityError(entity_id, f"Entity {entity_id} is not alive")
        store = self._components.get(component_type)
        if store is None or entity_id not in store:
            raise KeyError(
                f"Entity {entity_id} has no {component_type.__name__} component"
            )
        return cast(T, store[entity_id])

    def query(
        self, *component_types: type
    ) -> Generator[tuple[EntityId, tuple[Any, ...]], None, None]:
        if not component_types:
            return
        base_store = self._components.get(component_types[0])
        if base_store is None:
            return

        # Spawn order, so collision passes are deterministic.
        for eid in sorted(base_store):
            if eid not in self._alive:
                continue
            components: list[Any] = []
            for ctype in component_types:
                store = self._components.get(ctype)
                if store is None or eid not in store:
                    break
                components.append(store[eid])
            else:
                yield eid, tuple(components)

    def count(self, component_type: type) -> int:
        store = self._components.get(component_type)
        if store is None:
            return 0
        return sum(1 for eid in store if eid in self._alive)

    def alive(self, entity_id: EntityId) -> bool:
        return entity_id in self._alive
