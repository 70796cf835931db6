#!/usr/bin/env python3
"""Simple performance baseline for textwarden canonicalization and comparison."""

from __future__ import annotations

import argparse
import json
import random
import time
from typing import Callable, Dict, List

from textwarden.pipeline import try_canonicalize
from textwarden.profiles import PROFILES
from textwarden.similarity import (
    edit_distance,
    jaro_winkler,
    longest_common_substring,
    similarity_ratio,
)


_WORDS = [
    "password",
    "پرستو",
    "علی",
    "۱۲۳۴",
    "١٢٣",
    "ＡＢＣ",
    "Straße",
    "hello",
    "नमस्ते",
    "پر\u200cیناز",
]

_NOISE = ["\u202e", "\x00", "\u200b", "<b>", "</b>", "\t", "  "]

_COMPARISONS: Dict[str, Callable[[str, str], object]] = {
    "edit_distance": edit_distance,
    "similarity_ratio": similarity_ratio,
    "jaro_winkler": jaro_winkler,
    "longest_common_substring": longest_common_substring,
}


def _build_text(target_chars: int, noise_every: int) -> str:
    chunks: List[str] = []
    i = 0
    while sum(len(c) for c in chunks) < target_chars:
        if noise_every and i % noise_every == 0:
            chunks.append(random.choice(_NOISE))
        else:
            chunks.append(random.choice(_WORDS))
        i += 1
    return " ".join(chunks)[:target_chars]


def _timed(fn: Callable[[], object], runs: int) -> Dict[str, float]:
    durations: List[float] = []
    for _ in range(runs):
        start = time.perf_counter()
        fn()
        durations.append(time.perf_counter() - start)
    durations.sort()
    return {
        "min_ms": durations[0] * 1000.0,
        "p50_ms": durations[len(durations) // 2] * 1000.0,
        "max_ms": durations[-1] * 1000.0,
    }


def _report(label: str, stats: Dict[str, float]) -> None:
    print(
        f"  {label} min={stats['min_ms']:.2f}ms "
        f"p50={stats['p50_ms']:.2f}ms max={stats['max_ms']:.2f}ms"
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="textwarden perf baseline.")
    parser.add_argument("--sizes", nargs="+", type=int, default=[64, 256, 1000])
    parser.add_argument("--runs", type=int, default=5)
    parser.add_argument("--noise-every", type=int, default=5)
    parser.add_argument(
        "--output",
        type=str,
        default="",
        help="Optional path to write results as JSON.",
    )
    args = parser.parse_args()

    print("textwarden perf baseline")
    print(f"sizes={args.sizes} chars, runs={args.runs}, noise_every={args.noise_every}")

    results: Dict[str, Dict[str, Dict[str, float]]] = {}
    for size in args.sizes:
        text = _build_text(size, args.noise_every)
        other = _build_text(size, args.noise_every)
        print(f"\nsize={size} chars")
        size_key = str(size)
        results[size_key] = {}
        for name, profile in PROFILES.items():
            stats = _timed(lambda: try_canonicalize(text, profile), args.runs)
            results[size_key][name] = stats
            _report(f"profile={name}", stats)
        for name, compare in _COMPARISONS.items():
            stats = _timed(lambda: compare(text, other), args.runs)
            results[size_key][name] = stats
            _report(f"compare={name}", stats)
    if args.output:
        output_path = args.output
        with open(output_path, "w", encoding="utf-8") as handle:
            json.dump(
                {
                    "sizes": args.sizes,
                    "runs": args.runs,
                    "noise_every": args.noise_every,
                    "results": results,
                },
                handle,
                indent=2,
                sort_keys=True,
            )
        print(f"\nWrote results to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
