
class Solution:
    def gcd(self, m: int, n: int) -> int:
        """
        Largest value dividing both, searched from min(m, n) down
        """

        for i in range(min(m, n), 1, -1):
            if m%i == 0 == n%i:
                return i

        return 1
