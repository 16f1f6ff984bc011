
"""

Euclidean Algorithm (Algorithm E):

Divide m by n and keep the remainder r. If r is zero, n is the answer.
Otherwise the pair becomes (n, r) and we divide again. The GCD of two
numbers stays the same when the larger one is replaced by its remainder
modulo the smaller one.

"""

class Solution:
    def gcd(self, m: int, n: int) -> int:
        """
        Classic loop, expects m >= n > 0
        """

        r = m % n
        while r != 0:
            m, n = n, r
            r = m % n

        return n
