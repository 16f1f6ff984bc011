
class Solution:
    def gcd(self, m: int, n: int) -> int:
        """
        Alternating reduction with a single loop exit, expects m >= n > 0
        """

        while m != 0 and n != 0:
            m %= n
            if m != 0:
                n %= m

        return m if m != 0 else n
