from typing import List, Tuple

MASK64 = 0xFFFFFFFFFFFFFFFF


def rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & MASK64


class Xoshiro256PlusPlus:
    """
    xoshiro256++ generator seeded through splitmix64.
    Output is bit-identical on every platform for a given seed, which is what
    makes a maze reproducible from its seed alone.
    """

    __slots__ = ('state',)

    def __init__(self, seed: int = 0):
        self.state: List[int] = [0, 0, 0, 0]
        self.seed(seed)

    @classmethod
    def from_seed(cls, seed: int) -> "Xoshiro256PlusPlus":
        return cls(seed)

    def seed(self, x: int):
        x &= MASK64
        for i in range(4):
            x = (x + 0x9e3779b97f4a7c15) & MASK64
            z = x
            z = ((z ^ (z >> 30)) * 0xbf58476d1ce4e5b9) & MASK64
            z = ((z ^ (z >> 27)) * 0x94d049bb133111eb) & MASK64
            self.state[i] = z ^ (z >> 31)

    def next(self) -> int:
        s = self.state
        result = (rotl((s[0] + s[3]) & MASK64, 23) + s[0]) & MASK64

        t = (s[1] << 17) & MASK64

        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]

        s[2] ^= t

        s[3] = rotl(s[3], 45)

        return result

    def next_in_range(self, range_: int) -> int:
        """
        Uniform integer in [0, range_).
        Draws landing in the incomplete tail bucket are rejected, so there is
        no modulo bias.
        """
        if range_ <= 0:
            raise ValueError(f"Range must be positive, got {range_}")
        limit = (-range_) & MASK64
        while True:
            x = self.next()
            r = x % range_
            if ((x - r) & MASK64) <= limit:
                return r

    def copy(self) -> "Xoshiro256PlusPlus":
        clone = Xoshiro256PlusPlus.__new__(Xoshiro256PlusPlus)
        clone.state = list(self.state)
        return clone

    def getstate(self) -> Tuple[int, int, int, int]:
        return tuple(self.state)

    def setstate(self, state):
        if len(state) != 4:
            raise ValueError("State must contain exactly 4 words")
        self.state = [int(word) & MASK64 for word in state]
