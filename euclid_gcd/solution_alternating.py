
"""

Alternating Euclid (Algorithm F):

Instead of shuffling (m, n) <- (n, r) after every division, reduce m by n
and then n by m in turn. Whichever value hits zero first leaves the other
one as the answer. Same result as Algorithm E, fewer trivial assignments.

"""

class Solution:
    def gcd(self, m: int, n: int) -> int:
        """
        Two exits, expects m >= n > 0
        """

        while True:
            m %= n
            if m == 0:
                return n

            n %= m
            if n == 0:
                return m
