from __future__ import annotations

import argparse
import glob as stdlib_glob
import json
import os
import statistics
import tempfile
import time
import tracemalloc
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from dglob import DirFS, MapFS, glob, glob_fs


@dataclass
class CaseResult:
    backend: str
    case: str
    seconds_mean: float
    seconds_min: float
    seconds_max: float
    peak_kib_mean: float
    matches: int


def _run_with_memory(fn: Callable[[], int]) -> tuple[float, float, int]:
    tracemalloc.start()
    start = time.perf_counter()
    count = fn()
    elapsed = time.perf_counter() - start
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return elapsed, peak / 1024.0, count


def _tree_paths(fanout: int, depth: int, files_per_dir: int) -> list[str]:
    """Relative file paths of a balanced tree."""
    paths: list[str] = []
    dirs = [""]
    for _ in range(depth):
        dirs = [f"{d}d{i}/" for d in dirs for i in range(fanout)]
        for d in dirs:
            paths.extend(f"{d}f{j}.txt" for j in range(files_per_dir))
            paths.append(f"{d}README.md")
    return paths


def _write_tree(base: str, paths: list[str]) -> None:
    for rel in paths:
        path = os.path.join(base, *rel.split("/"))
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "wb"):
            pass


def run_case(
    backend: str,
    case: str,
    fn: Callable[[], int],
    repeat: int,
    warmup: int,
) -> CaseResult:
    for _ in range(warmup):
        fn()

    elapsed_list: list[float] = []
    peak_list: list[float] = []
    count = 0
    for _ in range(repeat):
        elapsed, peak_kib, count = _run_with_memory(fn)
        elapsed_list.append(elapsed)
        peak_list.append(peak_kib)

    return CaseResult(
        backend=backend,
        case=case,
        seconds_mean=statistics.mean(elapsed_list),
        seconds_min=min(elapsed_list),
        seconds_max=max(elapsed_list),
        peak_kib_mean=statistics.mean(peak_list),
        matches=count,
    )


def _fmt_ms(seconds: float) -> str:
    return f"{seconds * 1000:.2f}"


def print_table(results: list[CaseResult]) -> None:
    print("| Case | Backend | mean(ms) | min(ms) | max(ms) | peak KiB (mean) | matches |")
    print("|---|---:|---:|---:|---:|---:|---:|")
    for r in results:
        print(
            f"| {r.case} | {r.backend} | {_fmt_ms(r.seconds_mean)} |"
            f" {_fmt_ms(r.seconds_min)} | {_fmt_ms(r.seconds_max)} |"
            f" {r.peak_kib_mean:.1f} | {r.matches} |"
        )


def _results_to_dict(results: list[CaseResult]) -> list[dict[str, float | str | int]]:
    return [
        {
            "backend": r.backend,
            "case": r.case,
            "seconds_mean": r.seconds_mean,
            "seconds_min": r.seconds_min,
            "seconds_max": r.seconds_max,
            "peak_kib_mean": r.peak_kib_mean,
            "matches": r.matches,
        }
        for r in results
    ]


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark dglob vs glob.glob(recursive=True) vs Path.rglob"
    )
    parser.add_argument("--repeat", type=int, default=5)
    parser.add_argument("--warmup", type=int, default=1)
    parser.add_argument("--fanout", type=int, default=4)
    parser.add_argument("--depth", type=int, default=4)
    parser.add_argument("--files-per-dir", type=int, default=5)
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--save-json", default="", help="Save json report path")
    args = parser.parse_args()

    paths = _tree_paths(args.fanout, args.depth, args.files_per_dir)
    mapfs = MapFS({p: b"" for p in paths})
    results: list[CaseResult] = []

    with tempfile.TemporaryDirectory() as td:
        _write_tree(td, paths)
        dirfs = DirFS(td)
        cases = {
            "txt_below_top": "d0/**/*.txt",
            "readme_anywhere": "**/README.md",
        }
        for case, rel in cases.items():
            native = os.path.join(td, *rel.split("/"))
            results.append(
                run_case("dglob.glob", case, lambda: len(glob(native)), args.repeat, args.warmup)
            )
            results.append(
                run_case(
                    "dglob.glob_fs(DirFS)",
                    case,
                    lambda: len(glob_fs(dirfs, rel)),
                    args.repeat,
                    args.warmup,
                )
            )
            results.append(
                run_case(
                    "dglob.glob_fs(MapFS)",
                    case,
                    lambda: len(glob_fs(mapfs, rel)),
                    args.repeat,
                    args.warmup,
                )
            )
            results.append(
                run_case(
                    "glob.glob(recursive)",
                    case,
                    lambda: len(stdlib_glob.glob(native, recursive=True)),
                    args.repeat,
                    args.warmup,
                )
            )
        results.append(
            run_case(
                "Path.rglob",
                "txt_below_top",
                lambda: len(list(Path(td, "d0").rglob("*.txt"))),
                args.repeat,
                args.warmup,
            )
        )

    if args.json:
        print(json.dumps(_results_to_dict(results), indent=2))
        return

    print_table(results)

    if args.save_json:
        json_path = Path(args.save_json)
        json_path.parent.mkdir(parents=True, exist_ok=True)
        json_path.write_text(json.dumps(_results_to_dict(results), indent=2), encoding="utf-8")
        print(f"\nSaved JSON report: {json_path}")


if __name__ == "__main__":
    main()
