"""CSV export functionality for grid traversal results."""

import csv
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Any

REGION_FIELDS = ['region_id', 'value', 'area', 'perimeter', 'price',
                 'corners', 'bulk_price']
PATH_FIELDS = ['step', 'row', 'col', 'heading']
COORD_FIELDS = ['kind', 'row', 'col']


class CSVWriter:
    """
    Exports result rows to CSV format incrementally.

    Output format (patrol path):
        step,row,col,heading
        0,6,4,up
        ...
    """

    def __init__(self, output_path: Path, fieldnames: List[str]):
        self.output_path = Path(output_path)
        self.fieldnames = fieldnames
        self.file: Optional[Any] = None
        self.writer: Optional[csv.DictWriter] = None
        self._is_open = False
        self.rows_written = 0

    def open(self) -> None:
        """Initialize file and write header."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.file = open(self.output_path, 'w', newline='')
        self.writer = csv.DictWriter(self.file, fieldnames=self.fieldnames)
        self.writer.writeheader()
        self._is_open = True

    def append(self, rows: Iterable[Dict]) -> None:
        """Write a batch of rows."""
        if not self._is_open:
            self.open()
        for row in rows:
            self.writer.writerow(row)
            self.rows_written += 1
        self.file.flush()

    def close(self) -> None:
        """Close file handle."""
        if self.file:
            self.file.close()
            self.file = None
            self.writer = None
            self._is_open = False

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


def coordinate_rows(kind: str, coords: Iterable) -> List[Dict]:
    """Rows for a labelled collection of coordinates, sorted row-major."""
    return [{'kind': kind, 'row': r, 'col': c} for r, c in sorted(coords)]
