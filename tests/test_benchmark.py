import numpy as np
import pytest

from morton3d.arrays import encode_array
from morton3d.benchmark import (
    SCALAR_DECODERS,
    SCALAR_ENCODERS,
    benchmark_decoders,
    benchmark_encoders,
    generate_coordinates,
    summarize,
)
from run_benchmark import run_benchmark


def test_generate_coordinates():
    points = generate_coordinates(100, seed=3)
    assert points.shape == (100, 3)
    assert points.max() < 1 << 21
    np.testing.assert_array_equal(points, generate_coordinates(100, seed=3))


def test_generate_coordinates_rejects_negative():
    with pytest.raises(ValueError):
        generate_coordinates(-1)


def test_benchmark_encoders_all_succeed():
    points = generate_coordinates(200, seed=1)
    results = benchmark_encoders(points, num_runs=2)
    assert set(results) == set(SCALAR_ENCODERS) | {"NumPy Batch"}
    for data in results.values():
        assert len(data['times']) == 2
        assert all(data['successes'])


def test_benchmark_decoders_all_succeed():
    points = generate_coordinates(200, seed=2)
    codes = encode_array(points[:, 0], points[:, 1], points[:, 2])
    results = benchmark_decoders(codes, num_runs=2)
    assert set(results) == set(SCALAR_DECODERS) | {"NumPy Batch"}
    for data in results.values():
        assert all(data['successes'])


def test_summarize():
    rows = summarize({"LUT": {'times': [1.0, 3.0], 'successes': [True, False]}})
    assert rows == [["LUT", "2.000", "50.0%"]]


def test_run_benchmark_prints_tables(capsys):
    encode_results, decode_results = run_benchmark(50, 1, seed=0, show_progress=False)
    out = capsys.readouterr().out
    assert "--- Encoding ---" in out
    assert "--- Decoding ---" in out
    assert "LUT + Bit Scan" in out
    assert all(all(d['successes']) for d in encode_results.values())
    assert all(all(d['successes']) for d in decode_results.values())
