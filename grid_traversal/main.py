#!/usr/bin/env python3
"""
Grid Traversal & Region Analysis

Solves map-based grid puzzles: guard patrol with loop detection, garden
region pricing, antenna antinodes, uphill trails and word search.

Usage:
    python -m grid_traversal.main --config configs/patrol.yaml [options]
    python -m grid_traversal.main --puzzle garden --input inputs/garden.txt

Examples:
    python -m grid_traversal.main --config configs/patrol.yaml --workers 4
    python -m grid_traversal.main --config configs/garden.yaml --csv --snapshot
    python -m grid_traversal.main --puzzle patrol --input map.txt --gif --out-dir results/
    python -m grid_traversal.main --puzzle words --input letters.txt --quiet
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from grid_traversal.config import PUZZLES, RunConfig, load_config, validate_puzzle
from grid_traversal.loader import load_grid
from grid_traversal.model.grid import Grid, MalformedInputError
from grid_traversal.model.engine import PatrolEngine
from grid_traversal.model.regions import discover_all
from grid_traversal.model.metrics import measure_all, total_bulk_price, total_price
from grid_traversal.model import rays, trails, word_search
from grid_traversal.export.csv_writer import (
    CSVWriter, COORD_FIELDS, PATH_FIELDS, REGION_FIELDS, coordinate_rows
)
from grid_traversal.export.visualizer import Visualizer
from grid_traversal.export.reporter import Reporter

Say = Callable[[str], None]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Grid Traversal & Region Analysis',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m grid_traversal.main --config configs/patrol.yaml --workers 4
    python -m grid_traversal.main --config configs/garden.yaml --csv --snapshot
    python -m grid_traversal.main --puzzle patrol --input map.txt --gif --out-dir results/
    python -m grid_traversal.main --puzzle words --input letters.txt --quiet
        """
    )

    # Source of the run
    parser.add_argument('--config', type=Path, default=None,
                        help='Path to YAML configuration file')
    parser.add_argument('--puzzle', choices=PUZZLES, default=None,
                        help='Puzzle to solve (overrides config)')
    parser.add_argument('--input', type=Path, default=None,
                        help='Puzzle input file (overrides config)')

    # Optional overrides
    parser.add_argument('--out-dir', type=Path, default=Path('./output'),
                        help='Output directory for exports (default: ./output)')
    parser.add_argument('--workers', type=int, default=None,
                        help='Processes for the patrol obstacle sweep')
    parser.add_argument('--no-loops', dest='find_loops', action='store_false',
                        default=None,
                        help='Skip the patrol obstacle sweep')

    # Export toggles
    parser.add_argument('--csv', dest='csv', action='store_true', default=None,
                        help='Enable CSV export')
    parser.add_argument('--no-csv', dest='csv', action='store_false',
                        help='Disable CSV export')

    parser.add_argument('--snapshot', dest='snapshot', action='store_true', default=None,
                        help='Enable PNG snapshot')
    parser.add_argument('--no-snapshot', dest='snapshot', action='store_false',
                        help='Disable PNG snapshot')

    parser.add_argument('--gif', action='store_true', default=False,
                        help='Enable GIF animation of the patrol walk')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Suppress stdout output')

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> RunConfig:
    """Load the YAML config (if any) and apply CLI overrides."""
    if args.config is not None:
        config = load_config(args.config)
    elif args.puzzle is not None:
        config = RunConfig(puzzle=validate_puzzle(args.puzzle))
    else:
        raise ValueError("Either --config or --puzzle is required")

    if args.puzzle is not None:
        config.puzzle = validate_puzzle(args.puzzle)
    if args.input is not None:
        config.input_path = args.input
    if args.workers is not None:
        if args.workers < 1:
            raise ValueError(f"Worker count must be at least 1: {args.workers}")
        config.patrol.workers = args.workers
    if args.find_loops is not None:
        config.patrol.find_loops = args.find_loops
    if args.csv is not None:
        config.csv_enabled = args.csv
    if args.snapshot is not None:
        config.snapshot_enabled = args.snapshot
    if args.gif:
        config.gif_enabled = True
    config.quiet = args.quiet
    config.out_dir = args.out_dir

    if config.input_path is None:
        raise ValueError("No input file given (use --input or 'input' in config)")
    return config


def _write_csv(path: Path, fieldnames: List[str], rows: List[Dict]) -> None:
    with CSVWriter(path, fieldnames) as writer:
        writer.append(rows)


def run_patrol(grid: Grid, config: RunConfig, reporter: Reporter, say: Say) -> None:
    settings = config.patrol
    engine = PatrolEngine(grid, obstacle=settings.obstacle)
    say(f"  Agent at {engine.start.position} facing "
        f"{engine.start.heading.name.lower()}")

    def progress(done: int, total: int) -> None:
        if done % 500 == 0 or done == total:
            say(f"  Checked {done}/{total} obstacle candidates")

    result = engine.run(settings.find_loops, settings.workers, progress)

    reporter.add_answer('Visited cells', result.visited_count)
    reporter.add_answer('Walker escaped', 'yes' if result.escaped else 'no (loops)')
    if settings.find_loops:
        reporter.add_answer('Loop obstacles', len(result.loop_obstacles))

    if config.csv_enabled:
        path = config.out_dir / 'patrol_path.csv'
        _write_csv(path, PATH_FIELDS, result.to_csv_rows())
        reporter.add_output('Path CSV', path)
        if settings.find_loops:
            path = config.out_dir / 'loop_obstacles.csv'
            _write_csv(path, COORD_FIELDS,
                       coordinate_rows('loop', result.loop_obstacles))
            reporter.add_output('Loops CSV', path)

    visualizer = Visualizer(grid, obstacle=settings.obstacle)
    if config.snapshot_enabled:
        path = config.out_dir / 'patrol.png'
        visualizer.save_snapshot(
            path, f'Patrol | Visited: {result.visited_count}',
            {'visited': result.visited, 'loop': result.loop_obstacles}
        )
        reporter.add_output('Snapshot', path)
    if config.gif_enabled:
        path = config.out_dir / 'patrol.gif'
        visualizer.buffer_walk(result)
        say(f"Generating GIF ({len(visualizer.frames)} frames)...")
        visualizer.generate_gif(path, fps=10)
        reporter.add_output('Animation', path)


def run_garden(grid: Grid, config: RunConfig, reporter: Reporter, say: Say) -> None:
    regions = discover_all(grid)
    say(f"  Found {len(regions)} regions")
    metrics = measure_all(regions)

    reporter.add_answer('Regions', len(regions))
    reporter.add_answer('Total price', total_price(metrics))
    reporter.add_answer('Total bulk price', total_bulk_price(metrics))

    if config.csv_enabled:
        path = config.out_dir / 'regions.csv'
        _write_csv(path, REGION_FIELDS, [m.to_csv_row() for m in metrics])
        reporter.add_output('Region CSV', path)
    if config.snapshot_enabled:
        path = config.out_dir / 'garden.png'
        Visualizer(grid).save_snapshot(
            path, f'Garden | Regions: {len(regions)}', regions=regions
        )
        reporter.add_output('Snapshot', path)


def run_antennas(grid: Grid, config: RunConfig, reporter: Reporter, say: Say) -> None:
    background = config.antennas.background
    say(f"  Found {len(rays.antenna_pairs(grid, background))} antenna pairs")
    simple = rays.antinodes(grid, background)
    resonant = rays.resonant_antinodes(grid, background)

    reporter.add_answer('Antinodes', len(simple))
    reporter.add_answer('Resonant antinodes', len(resonant))

    if config.csv_enabled:
        path = config.out_dir / 'antinodes.csv'
        _write_csv(path, COORD_FIELDS,
                   coordinate_rows('antinode', simple)
                   + coordinate_rows('resonant', resonant))
        reporter.add_output('Antinode CSV', path)
    if config.snapshot_enabled:
        path = config.out_dir / 'antennas.png'
        Visualizer(grid, background=background).save_snapshot(
            path, f'Antennas | Resonant antinodes: {len(resonant)}',
            {'antinode': resonant}
        )
        reporter.add_output('Snapshot', path)


def run_trails(grid: Grid, config: RunConfig, reporter: Reporter, say: Say) -> None:
    settings = config.trails
    heads = trails.trailheads(grid, settings.trailhead)
    say(f"  Found {len(heads)} trailheads")

    score = trails.score_map(grid, settings.trailhead, settings.summit)
    rating = trails.rate_map(grid, settings.trailhead, settings.summit)
    summits = {
        trail[-1]
        for head in heads
        for trail in trails.find_trails(grid, head, settings.summit)
    }

    reporter.add_answer('Trailheads', len(heads))
    reporter.add_answer('Map score', score)
    reporter.add_answer('Map rating', rating)

    if config.csv_enabled:
        path = config.out_dir / 'trails.csv'
        _write_csv(path, COORD_FIELDS,
                   coordinate_rows('trailhead', heads)
                   + coordinate_rows('summit', summits))
        reporter.add_output('Trail CSV', path)
    if config.snapshot_enabled:
        path = config.out_dir / 'trails.png'
        Visualizer(grid).save_snapshot(
            path, f'Trails | Score: {score} | Rating: {rating}',
            {'summit': summits}
        )
        reporter.add_output('Snapshot', path)


def run_words(grid: Grid, config: RunConfig, reporter: Reporter, say: Say) -> None:
    settings = config.words
    reporter.add_answer(f'{settings.word} count',
                        word_search.count_word(grid, settings.word))
    reporter.add_answer(f'X-{settings.x_word} count',
                        word_search.count_x_pattern(grid, settings.x_word))


RUNNERS: Dict[str, Callable[[Grid, RunConfig, Reporter, Say], None]] = {
    'patrol': run_patrol,
    'garden': run_garden,
    'antennas': run_antennas,
    'trails': run_trails,
    'words': run_words,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Load configuration
    try:
        config = build_config(args)
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    def say(message: str) -> None:
        if not config.quiet:
            print(message)

    # Load input
    try:
        grid = load_grid(config.input_path, numeric=(config.puzzle == 'trails'))
    except FileNotFoundError:
        print(f"Error: Input file not found: {config.input_path}", file=sys.stderr)
        return 1
    except MalformedInputError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1

    say(f"Solving {config.puzzle}...")
    say(f"  Grid: {grid.height}x{grid.width}")

    reporter = Reporter(config.puzzle, config.input_path)
    try:
        RUNNERS[config.puzzle](grid, config, reporter, say)
    except ValueError as e:
        # MalformedInputError included
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        say("\nRun interrupted by user.")
        return 1

    say(reporter.generate_summary(f"{grid.height}x{grid.width}"))
    return 0


if __name__ == '__main__':
    sys.exit(main())
