"""Grid traversal and region analysis for map-based puzzles."""

__version__ = "0.1.0"
