from .solution import (
    DEFAULT_STRATEGY,
    STRATEGIES,
    InvalidInput,
    Solution,
    compute_gcd,
    get_strategy,
)
