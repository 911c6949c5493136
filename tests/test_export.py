"""Tests for CSV, image and text report exports."""

import csv

from PIL import Image

from grid_traversal.export.csv_writer import (
    COORD_FIELDS, CSVWriter, REGION_FIELDS, coordinate_rows
)
from grid_traversal.export.reporter import Reporter
from grid_traversal.export.visualizer import Visualizer
from grid_traversal.model.engine import PatrolEngine
from grid_traversal.model.metrics import measure_all
from grid_traversal.model.regions import discover_all


def test_csv_writer_writes_header_and_rows(tmp_path, garden_grid):
    path = tmp_path / 'out' / 'regions.csv'
    metrics = measure_all(discover_all(garden_grid))
    with CSVWriter(path, REGION_FIELDS) as writer:
        writer.append(m.to_csv_row() for m in metrics)
        assert writer.rows_written == 11

    with open(path, newline='') as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 11
    assert rows[0]['value'] == 'R'
    assert rows[0]['bulk_price'] == '120'


def test_csv_writer_opens_lazily(tmp_path):
    writer = CSVWriter(tmp_path / 'coords.csv', COORD_FIELDS)
    writer.append(coordinate_rows('loop', [(2, 1), (0, 5)]))
    writer.close()
    lines = (tmp_path / 'coords.csv').read_text().splitlines()
    assert lines == ['kind,row,col', 'loop,0,5', 'loop,2,1']


def test_reporter_summary():
    reporter = Reporter('garden', None)
    reporter.add_answer('Total price', 1930)
    reporter.add_output('Snapshot', None)
    report = reporter.generate_summary('10x10')
    assert 'GRID TRAVERSAL REPORT: GARDEN' in report
    assert 'Total price:' in report
    assert '1930' in report
    assert '(disabled)' in report
    assert 'Grid:  10x10' in report


def test_snapshot_with_regions(tmp_path, garden_grid):
    path = tmp_path / 'garden.png'
    Visualizer(garden_grid).save_snapshot(
        path, 'Garden', regions=discover_all(garden_grid)
    )
    with Image.open(path) as image:
        assert image.format == 'PNG'


def test_snapshot_with_highlights(tmp_path, trail_grid):
    path = tmp_path / 'trails.png'
    Visualizer(trail_grid).save_snapshot(path, 'Trails', {'summit': [(0, 1)]})
    assert path.exists()


def test_patrol_gif(tmp_path, patrol_grid):
    result = PatrolEngine(patrol_grid).run(find_loops=False)
    visualizer = Visualizer(patrol_grid, obstacle='#')
    visualizer.buffer_walk(result, every=20)
    # Frames at 0, 20, 40 and the final state
    assert len(visualizer.frames) == 4
    path = tmp_path / 'patrol.gif'
    visualizer.generate_gif(path, fps=5)
    with Image.open(path) as image:
        assert image.format == 'GIF'
        assert image.n_frames == 4
    visualizer.clear_frames()
    assert visualizer.frames == []
