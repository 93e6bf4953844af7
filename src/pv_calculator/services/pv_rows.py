"""
PV Rows Service - editable list of candidate down payments.

Holds the caller side of a calculation session. The engine only reads
the rows; ids are assigned here, one above the current maximum.
"""
from typing import Iterable, Iterator, Optional

from ..engine.models import PVRow


class PVRowList:
    """Ordered PV rows with monotonically increasing ids."""

    def __init__(self, values: Optional[Iterable[float]] = None):
        self._rows: list[PVRow] = []
        for value in values or ():
            self.add(value)

    @property
    def rows(self) -> list[PVRow]:
        """Snapshot of the rows in display order."""
        return list(self._rows)

    def values(self) -> list[float]:
        return [row.pv for row in self._rows]

    def get(self, row_id: int) -> Optional[PVRow]:
        """Get a single row by ID."""
        for row in self._rows:
            if row.id == row_id:
                return row
        return None

    def add(self, pv: float = 0.0) -> PVRow:
        """Append a new row; its id is one above the current maximum."""
        new_id = max((r.id for r in self._rows), default=0) + 1
        row = PVRow(id=new_id, pv=pv)
        self._rows.append(row)
        return row

    def update(self, row_id: int, pv: float) -> PVRow:
        """Replace the amount of an existing row."""
        for i, row in enumerate(self._rows):
            if row.id == row_id:
                self._rows[i] = PVRow(id=row_id, pv=pv)
                return self._rows[i]
        raise ValueError(f"PV row '{row_id}' not found")

    def delete(self, row_id: int) -> bool:
        """
        Delete a row.

        The last remaining row is kept; returns False in that case.
        """
        if self.get(row_id) is None:
            raise ValueError(f"PV row '{row_id}' not found")
        if len(self._rows) <= 1:
            return False
        self._rows = [r for r in self._rows if r.id != row_id]
        return True

    def sync(self, entries: Iterable[tuple[Optional[int], float]]) -> bool:
        """
        Sync the list with rows edited in a data grid.

        entries are (row_id, pv) pairs in display order; a None or unknown
        row_id marks a new row. Rows missing from entries are dropped,
        always keeping one row. Returns True when new ids were assigned.
        """
        known = {r.id for r in self._rows}
        next_id = max(known, default=0) + 1
        seen = set()
        synced = []
        assigned = False
        for row_id, pv in entries:
            if row_id is None or row_id not in known or row_id in seen:
                row_id = next_id
                next_id += 1
                assigned = True
            seen.add(row_id)
            synced.append(PVRow(id=row_id, pv=pv))
        if not synced:
            synced = self._rows[:1]
        self._rows = synced
        return assigned

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[PVRow]:
        return iter(list(self._rows))
