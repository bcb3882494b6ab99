import argparse
import time

import numpy as np
from tabulate import tabulate

from morton3d.arrays import encode_array
from morton3d.benchmark import benchmark_decoders, benchmark_encoders, generate_coordinates, summarize
from morton3d import config


def run_benchmark(num_points: int, num_runs: int, seed: int | None = None, show_progress: bool = True):
    """
    Generates random coordinates, runs every encoder and decoder over them
    and prints the averaged results.
    """
    print("--- 3D Morton Codec Benchmark ---")

    # 1. Generate data
    print(f"\n1. Generating {num_points} random coordinates ({config.COORD_BITS} bits per axis)...")
    points = generate_coordinates(num_points, seed=seed)

    # 2. Encoders
    print(f"2. Benchmarking encoders over {num_runs} runs...")
    encode_results = benchmark_encoders(points, num_runs, show_progress=show_progress)

    # 3. Decoders run on the codes of the same points
    print(f"3. Benchmarking decoders over {num_runs} runs...")
    start_time = time.perf_counter()
    codes = encode_array(points[:, 0], points[:, 1], points[:, 2])
    end_time = time.perf_counter()
    print(f"Encoded test codes in {(end_time - start_time) * 1e3:.2f} ms")
    decode_results = benchmark_decoders(codes, num_runs, show_progress=show_progress)

    headers = ["Implementation", "Avg Time (µs/call)", "Success Rate"]

    print("\n\n--- Encoding ---")
    print(tabulate(summarize(encode_results), headers=headers, tablefmt="grid"))
    print("\n--- Decoding ---")
    print(tabulate(summarize(decode_results), headers=headers, tablefmt="grid"))

    default_decoder = "LUT + Bit Scan" if config.USE_BITSCAN else "LUT"
    print("\nAnalysis:")
    print(f"Averaged over {num_runs} runs on {num_points} points.")
    print(f"Default decode implementation: {default_decoder} "
          f"({np.mean(decode_results[default_decoder]['times']):.3f} µs/call).")
    print("-" * 80)

    return encode_results, decode_results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Benchmark the 3D Morton encode/decode implementations.")
    parser.add_argument("--num-points", type=int, default=100000,
                        help="Number of random coordinates to encode and decode per run.")
    parser.add_argument("--num-runs", type=int, default=10,
                        help="Number of runs to average results over.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random coordinate generator.")
    parser.add_argument("--no-progress", action="store_true",
                        help="Disable the progress bars.")
    args = parser.parse_args()

    if args.num_points <= 0:
        parser.error("--num-points must be positive")
    if args.num_runs <= 0:
        parser.error("--num-runs must be positive")

    run_benchmark(args.num_points, args.num_runs, seed=args.seed, show_progress=not args.no_progress)
