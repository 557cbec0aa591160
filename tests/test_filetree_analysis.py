import io
import math

import pytest

from dslabs.filetree.analysis import CASES, calc_gain, run_analysis


def _write(path, records):
    lines = [str(len(records))]
    for name, day, month, year in records:
        lines += [name, str(day), str(month), str(year), "1", "1"]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


@pytest.fixture
def dataset(tmp_path):
    path = tmp_path / "big.txt"
    _write(path, [("m", 1, 1, 1990), ("c", 2, 2, 2005),
                  ("x", 3, 3, 2010), ("a", 4, 4, 1980), ("q", 5, 5, 2020)])
    return path


def test_calc_gain_values():
    assert calc_gain(200, 50) == 75.0
    assert calc_gain(100, 100) == 0.0
    assert math.isnan(calc_gain(0, 0))


def test_run_analysis_rows(dataset):
    out = io.StringIO()
    rows = run_analysis(dataset, tests=2, warmup=1, out=out)
    assert len(rows) == len(CASES)
    for row, (sample, label) in zip(rows, CASES):
        assert row["case"] == label.strip()
        assert row["sample"] == sample
        assert row["total_sorted_ns"] == row["resort_ns"] + row["delete_sorted_ns"]
        assert min(row["delete_unsorted_ns"], row["resort_ns"], row["delete_sorted_ns"]) >= 0


def test_run_analysis_output(dataset):
    out = io.StringIO()
    run_analysis(dataset, tests=1, warmup=0, out=out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "Результаты сравнения (в наносекундах):"
    assert len(lines) == 2 + len(CASES)
    for line, (_, label) in zip(lines[2:], CASES):
        assert line.startswith(f"| {label} |")
        assert line.endswith("% |")


def test_run_analysis_rejects_zero_tests(dataset):
    with pytest.raises(ValueError):
        run_analysis(dataset, tests=0, out=io.StringIO())


def test_run_analysis_missing_file(tmp_path):
    with pytest.raises(OSError):
        run_analysis(tmp_path / "absent.txt", tests=1, warmup=0, out=io.StringIO())