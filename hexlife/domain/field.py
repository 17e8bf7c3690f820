"""One generation of cell states keyed by cell identifier."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from hexlife.domain.cell import CellState
from hexlife.domain.grid import CellId


class Field:
    """Mapping from cell to state for every cell of the active tessellation."""

    __slots__ = ("_states",)

    def __init__(self, states: dict[CellId, CellState] | None = None) -> None:
        self._states: dict[CellId, CellState] = states if states is not None else {}

    @classmethod
    def empty(cls, cells: Iterable[CellId]) -> Field:
        """Field with one fresh (unoccupied, unmarked) state per cell."""
        return cls({cell: CellState() for cell in cells})

    def __contains__(self, cell: object) -> bool:
        return cell in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[CellId]:
        return iter(self._states)

    def get(self, cell: CellId) -> CellState | None:
        return self._states.get(cell)

    def put(self, cell: CellId, state: CellState) -> None:
        self._states[cell] = state

    def items(self) -> Iterator[tuple[CellId, CellState]]:
        return iter(self._states.items())

    def is_occupied(self, cell: CellId) -> bool:
        """Occupancy of ``cell``; cells outside the field count as empty."""
        state = self._states.get(cell)
        return state is not None and state.occupied

    def occupied_cells(self) -> set[CellId]:
        return {cell for cell, state in self._states.items() if state.occupied}

    def marked_cells(self) -> list[CellId]:
        return [cell for cell, state in self._states.items() if state.marked]

    def population(self) -> int:
        return sum(1 for state in self._states.values() if state.occupied)
