
class Solution:
    def gcd(self, m: int, n: int) -> int:
        """
        Recursive Algorithm E, expects m >= n > 0
        """

        r = m % n
        if r == 0:
            return n

        return self.gcd(n, r)
