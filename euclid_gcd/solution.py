
"""

Greatest common divisor of two positive integers.

compute_gcd validates the pair, makes sure m >= n, then hands it to one of
the reduction strategies below. The default is the alternating reduction
with a single loop exit; the others give the same answer and are kept for
comparison and benchmarking.

"""

from . import (
    solution_alternating,
    solution_alternating_single_exit,
    solution_euclidean_algo,
    solution_recursion,
    solution_step_loop,
)


class InvalidInput(ValueError):
    """Raised when either input is not a strictly positive integer."""


# ---------------- STRATEGIES ----------------
STRATEGIES = {
    "euclidean": solution_euclidean_algo.Solution().gcd,
    "step_loop": solution_step_loop.Solution().gcd,
    "recursion": solution_recursion.Solution().gcd,
    "alternating": solution_alternating.Solution().gcd,
    "alternating_single_exit": solution_alternating_single_exit.Solution().gcd,
}
DEFAULT_STRATEGY = "alternating_single_exit"


def get_strategy(name):
    if not isinstance(name, str) or name not in STRATEGIES:
        raise KeyError(f"Unknown strategy {name!r}, expected one of: {', '.join(STRATEGIES)}")
    return STRATEGIES[name]


def _is_int(x):
    return isinstance(x, int) and not isinstance(x, bool)


class Solution:
    def compute_gcd(self, m: int, n: int, strategy=None) -> int:
        """
        Validate, order the pair so m >= n, then reduce.

        strategy is a name from STRATEGIES or any callable taking (m, n)
        with m >= n > 0. None means the default strategy.
        """

        if not (_is_int(m) and _is_int(n)) or m <= 0 or n <= 0:
            raise InvalidInput(f"gcd: integers are not positive: m={m!r}, n={n!r}")

        if m < n:
            m, n = n, m

        if strategy is None:
            strategy = STRATEGIES[DEFAULT_STRATEGY]
        elif isinstance(strategy, str):
            strategy = get_strategy(strategy)

        return strategy(m, n)


def compute_gcd(m: int, n: int, strategy=None) -> int:
    return Solution().compute_gcd(m, n, strategy)


# ------------------ Basic Tests ------------------
def run_tests():
    sol = Solution()

    test_cases = [
        (1, 1, 1),
        (5, 5, 5),
        (1, 7, 1),
        (12, 18, 6),
        (18, 12, 6),
        (17, 13, 1),
        (100, 10, 10),
        (270, 192, 6),
        (2166, 6099, 57),
    ]

    for m, n, expected in test_cases:
        for name, strategy in STRATEGIES.items():
            result = sol.compute_gcd(m, n, strategy)
            assert result == expected, (
                f"FAILED: compute_gcd({m}, {n}) [{name}]\n"
                f"Expected: {expected}\n"
                f"Got: {result}"
            )

    for m, n in [(-1, 2), (2, -1), (0, 2), (2, 0)]:
        try:
            sol.compute_gcd(m, n)
        except InvalidInput:
            continue
        raise AssertionError(f"FAILED: compute_gcd({m}, {n}) did not raise InvalidInput")

    print("✅ All tests passed")


if __name__ == "__main__":
    run_tests()
