import time

import numpy as np
from tqdm import tqdm

from .arrays import decode_array, encode_array
from .codec import (
    decode_lut,
    decode_lut_bitscan,
    decode_x_lut,
    decode_y_lut,
    decode_z_lut,
    encode_lut,
    encode_lut_xshifted,
)
from .config import COORD_BITS
from .utils import coords_to_z_order, z_order_to_coords

# --- Benchmarks of the Morton Codec Implementations ---


def generate_coordinates(num_points: int, seed: int | None = None) -> np.ndarray:
    """
    Draws uniformly random coordinates covering the full 21-bit domain.
    Returns:
        An array of shape (num_points, 3) holding (x, y, z) rows.
    """
    if num_points < 0:
        raise ValueError(f"num_points must be non-negative, got {num_points}")
    rng = np.random.default_rng(seed)
    return rng.integers(0, 1 << COORD_BITS, size=(num_points, 3), dtype=np.uint64)


def _decode_single_axes(code: int) -> tuple[int, int, int]:
    return decode_x_lut(code), decode_y_lut(code), decode_z_lut(code)


def _decode_batch(codes: list[int]) -> list[tuple[int, int, int]]:
    xs, ys, zs = decode_array(np.array(codes, dtype=np.uint64))
    return list(zip(xs.tolist(), ys.tolist(), zs.tolist()))


def _encode_batch(points: list[tuple[int, int, int]]) -> list[int]:
    arr = np.array(points, dtype=np.uint64).reshape(-1, 3)
    return encode_array(arr[:, 0], arr[:, 1], arr[:, 2]).tolist()


SCALAR_ENCODERS = {
    "Bit Loop": coords_to_z_order,
    "LUT": encode_lut,
    "LUT (x table only)": encode_lut_xshifted,
}

SCALAR_DECODERS = {
    "Bit Loop": z_order_to_coords,
    "LUT": decode_lut,
    "LUT + Bit Scan": decode_lut_bitscan,
    "LUT Single Axis": _decode_single_axes,
}


def _new_results(names) -> dict:
    return {name: {'times': [], 'successes': []} for name in names}


def _record(results: dict, name: str, elapsed: float, count: int, success: bool):
    results[name]['times'].append(elapsed * 1e6 / max(count, 1))
    results[name]['successes'].append(success)


def benchmark_encoders(points: np.ndarray, num_runs: int, show_progress: bool = False) -> dict:
    """
    Times every encoder over the given points, num_runs times.
    Each run is checked against the bit-by-bit reference encoding.
    Returns:
        A dict mapping implementation name to lists of per-run 'times' (µs per point)
        and 'successes'.
    """
    triples = [tuple(p) for p in np.asarray(points, dtype=np.uint64).reshape(-1, 3).tolist()]
    expected = [coords_to_z_order(x, y, z) for x, y, z in triples]
    results = _new_results(list(SCALAR_ENCODERS) + ["NumPy Batch"])

    for _ in tqdm(range(num_runs), desc="Encoding", unit="run", disable=not show_progress):
        for name, encoder in SCALAR_ENCODERS.items():
            start_time = time.perf_counter()
            codes = [encoder(x, y, z) for x, y, z in triples]
            end_time = time.perf_counter()
            _record(results, name, end_time - start_time, len(triples), codes == expected)

        start_time = time.perf_counter()
        codes = _encode_batch(triples)
        end_time = time.perf_counter()
        _record(results, "NumPy Batch", end_time - start_time, len(triples), codes == expected)

    return results


def benchmark_decoders(codes, num_runs: int, show_progress: bool = False) -> dict:
    """
    Times every decoder over the given codes, num_runs times.
    Each run is checked against the bit-by-bit reference decoding.
    """
    codes = [int(c) for c in codes]
    expected = [z_order_to_coords(c) for c in codes]
    results = _new_results(list(SCALAR_DECODERS) + ["NumPy Batch"])

    for _ in tqdm(range(num_runs), desc="Decoding", unit="run", disable=not show_progress):
        for name, decoder in SCALAR_DECODERS.items():
            start_time = time.perf_counter()
            coords = [decoder(c) for c in codes]
            end_time = time.perf_counter()
            _record(results, name, end_time - start_time, len(codes), coords == expected)

        start_time = time.perf_counter()
        coords = _decode_batch(codes)
        end_time = time.perf_counter()
        _record(results, "NumPy Batch", end_time - start_time, len(codes), coords == expected)

    return results


def summarize(results: dict) -> list[list[str]]:
    """Averages the per-run measurements into table rows."""
    table_data = []
    for name, data in results.items():
        avg_time = np.mean(data['times']) if data['times'] else 0
        success_rate = np.mean(data['successes']) * 100 if data['successes'] else 0
        table_data.append([name, f"{avg_time:.3f}", f"{success_rate:.1f}%"])
    return table_data
