"""Linear, binary and interpolation ("dictionary") search with step counts."""

from __future__ import annotations

import argparse
import math
import random
from dataclasses import dataclass
from typing import Sequence

from numlab.sorting import merge_sort


@dataclass(frozen=True)
class SearchResult:
    """Where a key was found (None if absent) and how many probes it took."""

    index: int | None
    count: int

    @property
    def found(self) -> bool:
        return self.index is not None


def linear_search(values: Sequence[int], key: int) -> SearchResult:
    """Scan from the front; the list need not be sorted."""
    for count, (i, value) in enumerate(enumerate(values), start=1):
        if value == key:
            return SearchResult(i, count)
    return SearchResult(None, len(values))


def binary_search(values: Sequence[int], key: int) -> SearchResult:
    """Halve the search interval of a sorted list until the key is found."""
    low, high = 0, len(values) - 1
    count = 0
    while high >= low:
        count += 1
        mid = (low + high) // 2
        if key < values[mid]:
            high = mid - 1
        elif key == values[mid]:
            return SearchResult(mid, count)
        else:
            low = mid + 1
    return SearchResult(None, count)


def dictionary_search(values: Sequence[int], key: int) -> SearchResult:
    """Interpolation search of a sorted list, probing where the key should lie."""
    low, high = 0, len(values) - 1
    count = 0
    while high >= low:
        count += 1
        lo_val, hi_val = values[low], values[high]
        if key < lo_val or key > hi_val:
            break
        if hi_val == lo_val:
            mid = low
        else:
            fraction = (key - lo_val) / (hi_val - lo_val)
            mid = int(fraction * (high - low) + low)
        if key < values[mid]:
            high = mid - 1
        elif key == values[mid]:
            return SearchResult(mid, count)
        else:
            low = mid + 1
    return SearchResult(None, count)


def run_trial(size: int, rng: random.Random) -> tuple[int, dict[str, SearchResult]]:
    """Search a random list of ``size`` integers in [0, size) for one of its elements.

    The linear search runs on the unsorted list; binary and dictionary
    searches run after a merge sort. Returns (key, results by method name).
    """
    if size < 1:
        raise ValueError("size must be positive")
    values = [rng.randrange(size) for _ in range(size)]
    key = values[rng.randrange(size)]
    linear = linear_search(values, key)
    ordered = merge_sort(values)
    return key, {
        "linear": linear,
        "binary": binary_search(ordered, key),
        "dictionary": dictionary_search(ordered, key),
    }


def _fmt_index(result: SearchResult) -> int:
    return -1 if result.index is None else result.index


def main(argv: Sequence[str] | None = None) -> int:
    """Compare probe counts of the three searches over several random trials."""
    parser = argparse.ArgumentParser(description="Compare search algorithms.")
    parser.add_argument("--size", type=int, default=10000000, help="list length")
    parser.add_argument("--trials", type=int, default=4, help="number of trials")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.size < 2 or args.trials < 1:
        parser.error("--size must be at least 2 and --trials positive")

    rng = random.Random(args.seed)
    size = args.size
    for trial in range(1, args.trials + 1):
        print()
        print(f"Trial #{trial}:  ", end="")
        key, results = run_trial(size, rng)
        print(f"Searching for key = {key}")
        lin, binr, dic = results["linear"], results["binary"], results["dictionary"]
        print(
            f" Linear search found at  {_fmt_index(lin)} with {lin.count} "
            f"iterations compared average   Nsize/2 {size // 2}"
        )
        print(
            f" Binary  search found at  {_fmt_index(binr)} with {binr.count} "
            f"iterations  compared to average log2(Nsize) {math.log2(size):g}"
        )
        print(
            f" Dictionary   found at  {_fmt_index(dic)} with {dic.count} "
            f"iterations compared to average log2(log2(Nsize)  {math.log2(math.log2(size)):g}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())