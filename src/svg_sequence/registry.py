from __future__ import annotations

from collections.abc import Iterable, Iterator

# ============================================================================
# Actor registry
#
# Ordered, duplicate-free list of actor ids. The list order is the lane order
# used by the layout engine; there is no removal.
# ============================================================================


class ActorRegistry:
    def __init__(self) -> None:
        self._ids: list[str] = []

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, actor_id: object) -> bool:
        return actor_id in self._ids

    @property
    def ids(self) -> list[str]:
        return list(self._ids)

    def ensure(self, actor_id: str) -> None:
        """Append an actor if it's new. Empty ids are ignored."""
        if actor_id and actor_id not in self._ids:
            self._ids.append(actor_id)

    def set_order(self, actor_ids: Iterable[str]) -> None:
        """Put the given actors first, in the given order.

        Unknown ids are created, known ids move to their new position, and
        every actor not named keeps its relative order after them.
        """
        ordered: list[str] = []
        for actor_id in actor_ids:
            if actor_id and actor_id not in ordered:
                ordered.append(actor_id)

        remaining = [a for a in self._ids if a not in ordered]
        self._ids = ordered + remaining
