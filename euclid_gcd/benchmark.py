import os
import time
from datetime import datetime, timezone

from .solution import STRATEGIES, InvalidInput, compute_gcd

# ---------------- CONFIG ----------------
BENCHMARK_PAIR = (2166, 6099)
# raw env value, parsed by parse_rounds() in main()
BENCHMARK_ROUNDS = os.getenv("GCD_BENCHMARK_ROUNDS", "100000")

# ---------------- HELPERS ----------------
def log(msg):
    print(f"[{datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S')}] {msg}")

def parse_rounds(value):
    try:
        rounds = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"rounds must be an integer, got {value!r}") from None
    if rounds < 1:
        raise ValueError(f"rounds must be at least 1, got {rounds}")
    return rounds

def time_calls(func, m, n, rounds):
    start = time.perf_counter()
    for _ in range(rounds):
        func(m, n)
    return (time.perf_counter() - start) / rounds

# ---------------- BENCHMARK ----------------
def run_benchmark(m=BENCHMARK_PAIR[0], n=BENCHMARK_PAIR[1], rounds=None):
    """
    Seconds per call for compute_gcd and for every registered strategy.
    Strategies are timed directly on the ordered pair, skipping validation.
    rounds defaults to BENCHMARK_ROUNDS.
    """
    rounds = parse_rounds(BENCHMARK_ROUNDS if rounds is None else rounds)

    expected = compute_gcd(m, n)
    if m < n:
        m, n = n, m

    results = {"compute_gcd": time_calls(compute_gcd, m, n, rounds)}
    for name, strategy in STRATEGIES.items():
        result = strategy(m, n)
        if result != expected:
            raise RuntimeError(f"{name} returned {result} but expected {expected}")
        results[name] = time_calls(strategy, m, n, rounds)
    return results

# ---------------- MAIN ----------------
def main():
    m, n = BENCHMARK_PAIR
    try:
        rounds = parse_rounds(BENCHMARK_ROUNDS)
    except ValueError as e:
        log(f"⚠️ Invalid GCD_BENCHMARK_ROUNDS: {e}")
        raise

    log(f"Benchmarking gcd({m}, {n}) over {rounds} rounds")
    try:
        results = run_benchmark(m, n, rounds)
    except InvalidInput as e:
        log(f"⚠️ Invalid benchmark pair: {e}")
        raise
    for name, secs in results.items():
        log(f"{name}: {secs * 1e9:.1f} ns/op")

if __name__ == "__main__":
    main()
