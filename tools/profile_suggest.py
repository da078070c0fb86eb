# tools/profile_suggest.py
"""
Small profiling harness for PrefixStore.query.
Usage:
  python tools/profile_suggest.py --warm 100 --iters 1000 --extra 20000 --prefix "co"

Seeds the default vocabulary (plus optional synthetic words), then prints
mean/median/p90/max latency and a sample of suggestions.
"""
import argparse
import random
import statistics
import string
import time
from statistics import median

from autocomplete_chatbot.core.trie import PrefixStore

QUERIES = ["c", "co", "cha", "pro", "data", "de", "te", "h", "java", "zz"]


def synthetic_words(n, seed=0, min_len=3, max_len=10):
    """Deterministic pseudo-random lowercase words."""
    rng = random.Random(seed)
    for _ in range(n):
        size = rng.randint(min_len, max_len)
        yield "".join(rng.choice(string.ascii_lowercase) for _ in range(size))


def build_store(extra=0, seed=0):
    store = PrefixStore.with_defaults()
    for w in synthetic_words(extra, seed=seed):
        store.insert(w, 1)
    return store


def benchmark(store, queries, iterations=200, limit=5, seed=0):
    rng = random.Random(seed)
    times = []
    for _ in range(iterations):
        q = rng.choice(queries)
        t0 = time.perf_counter()
        _ = store.query(q, limit)
        t1 = time.perf_counter()
        times.append((t1 - t0) * 1000.0)  # ms
    return times


def summarize(times):
    times_sorted = sorted(times)
    if not times_sorted:
        return {"count": 0, "mean_ms": 0.0, "median_ms": 0.0, "p90_ms": 0.0, "max_ms": 0.0}
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": median(times_sorted),
        "p90_ms": times_sorted[max(int(0.9 * len(times_sorted)) - 1, 0)],
        "max_ms": max(times_sorted),
    }


def positive_int(value):
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return n


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--warm", type=int, default=50, help="warmup iterations")
    parser.add_argument("--iters", type=positive_int, default=500, help="measured iterations")
    parser.add_argument("--extra", type=int, default=0, help="synthetic words added on top of the seed vocabulary")
    parser.add_argument("--prefix", type=str, default="co", help="prefix for the sample output")
    args = parser.parse_args(argv)

    store = build_store(args.extra)
    print(f"Store: {store.unique_word_count} words, weight {store.total_insert_weight}")

    print("Warming up...")
    benchmark(store, QUERIES, iterations=args.warm)

    print("Measuring...")
    s = summarize(benchmark(store, QUERIES, iterations=args.iters))
    print("Stats (ms): mean=%.4f median=%.4f p90=%.4f max=%.4f" % (
        s["mean_ms"], s["median_ms"], s["p90_ms"], s["max_ms"],
    ))
    print("Sample query output:", store.query(args.prefix, 5))
    return s


if __name__ == "__main__":
    main()
