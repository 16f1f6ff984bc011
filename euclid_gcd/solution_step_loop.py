
class Solution:
    def gcd(self, m: int, n: int) -> int:
        """
        Algorithm E spelled out step by step, expects m >= n > 0
        """

        while True:
            # E1. find remainder
            r = m % n

            # E2. is it zero?
            if r == 0:
                break

            # E3. reduce
            m = n
            n = r

        return n
