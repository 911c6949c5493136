"""Summary report generation for grid traversal runs."""

from typing import Dict, List, Optional
from pathlib import Path


class Reporter:
    """Generates a formatted text report from scalar puzzle answers."""

    def __init__(self, puzzle: str, input_path: Optional[Path]):
        self.puzzle = puzzle
        self.input_path = input_path
        self.answers: Dict[str, object] = {}
        self.output_files: Dict[str, Optional[Path]] = {}

    def add_answer(self, label: str, value: object) -> None:
        self.answers[label] = value

    def add_output(self, label: str, path: Optional[Path]) -> None:
        """Register an export; None marks it as disabled."""
        self.output_files[label] = path

    def generate_summary(self, grid_size: Optional[str] = None) -> str:
        """Returns formatted text report."""
        width = max([len(label) for label in self.answers] + [20]) + 2

        lines: List[str] = [
            "",
            "=" * 80,
            f"{'GRID TRAVERSAL REPORT: ' + self.puzzle.upper():^80}".rstrip(),
            "=" * 80,
            f"Input: {self.input_path if self.input_path else '(none)'}",
        ]
        if grid_size:
            lines.append(f"Grid:  {grid_size}")

        lines += ["", "ANSWERS", "-" * 40]
        for label, value in self.answers.items():
            lines.append(f"{label + ':':<{width}}{value}")

        if self.output_files:
            lines += ["", "OUTPUT FILES", "-" * 40]
            for label, path in self.output_files.items():
                shown = path if path is not None else "(disabled)"
                lines.append(f"{label + ':':<12}{shown}")

        lines.append("=" * 80)
        return "\n".join(lines)
