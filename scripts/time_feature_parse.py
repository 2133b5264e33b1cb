#!/usr/bin/env python3
"""Quick perf benchmark for feature-file parsing."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from gherkinpy import GherkinPrettyFormatter, parse_feature


def _collect_feature_files(root: Path) -> list[Path]:
    return [path for path in sorted(root.rglob("*.feature")) if path.is_file()]


def _run_once(
    files: list[Path],
    *,
    label: str,
    show_progress: bool,
    format_output: bool,
) -> tuple[float, int, int, int]:
    formatter = GherkinPrettyFormatter()
    start = time.perf_counter()
    total_scenarios = 0
    total_steps = 0
    iterator = tqdm(files, desc=label, unit="file") if show_progress else files
    for path in iterator:
        feature = parse_feature(path.read_text(encoding="utf-8"))
        if feature is None:
            continue
        total_scenarios += len(feature.scenarios)
        total_steps += sum(len(block.steps) for block in feature.blocks)
        if format_output:
            formatter.format(feature)
    duration = time.perf_counter() - start
    return duration, len(files), total_scenarios, total_steps


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark feature parsing throughput")
    parser.add_argument("root", type=Path, help="Directory searched recursively for *.feature files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument("--format", action="store_true", help="Also pretty-print every parsed feature")
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_feature_files(root)
    if not files:
        raise SystemExit(f"No .feature files found under {root}")

    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                files,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
                format_output=args.format,
            )

        timings: list[float] = []
        files_count = 0
        scenarios_count = 0
        steps_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, files_count, scenarios_count, steps_count = _run_once(
                files,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
                format_output=args.format,
            )
            timings.append(duration)
        return timings, files_count, scenarios_count, steps_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, files_count, scenarios_count, steps_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, files_count, scenarios_count, steps_count = _benchmark()

    mean = statistics.mean(timings)
    print(f"Dataset: {root}")
    print(f"Files: {files_count}")
    print(f"Scenarios: {scenarios_count}")
    print(f"Steps: {steps_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {files_count / mean:.1f}")
    print(f"Steps/s (mean): {steps_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
