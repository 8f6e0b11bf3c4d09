"""Seeded xorshift stream used to draw every random value of an icon.

The lanes behave like 32-bit signed integers: every shift, add and xor wraps
at 32 bits, so the sequence is reproducible bit-for-bit for a given seed.
"""
from typing import Iterable, List, Tuple


MASK32 = 0xFFFFFFFF
UINT32_RANGE = 1 << 32
# The xorshift step leaves the sign bit of lane 3 clear, so draws fall in [0, 1)
DRAW_SCALE = 1 << 31


def wrap32(value: int) -> int:
    """Wrap an arbitrary Python int to a signed 32-bit value."""
    value &= MASK32
    return value - UINT32_RANGE if value & 0x80000000 else value


def char_codes(text: str) -> Iterable[int]:
    """Yield the UTF-16 code units of `text`.

    Characters outside the BMP contribute both halves of their surrogate pair.
    """
    raw = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(raw), 2):
        yield raw[i] | (raw[i + 1] << 8)


class XorShift128:
    """Four-lane xorshift generator.

    Each icon owns one instance; nothing is kept at module level.
    """

    def __init__(self) -> None:
        self._lanes = [0, 0, 0, 0]

    @classmethod
    def from_seed(cls, text: str) -> "XorShift128":
        rng = cls()
        rng.seed(text)
        return rng

    @property
    def state(self) -> Tuple[int, int, int, int]:
        return tuple(self._lanes)

    def seed(self, text: str) -> None:
        """Fold `text` into the lanes (hash * 31 + code, round-robin).

        Lanes are not reset, so seeding twice keeps perturbing the state.
        """
        lanes = self._lanes
        for i, code in enumerate(char_codes(text)):
            lane = lanes[i % 4]
            lanes[i % 4] = wrap32(wrap32(lane << 5) - lane + code)

    def next_uint32(self) -> int:
        lanes = self._lanes
        t = lanes[0] ^ wrap32(lanes[0] << 11)
        lanes[0] = lanes[1]
        lanes[1] = lanes[2]
        lanes[2] = lanes[3]
        w = lanes[3]
        # >> on a negative int is an arithmetic shift, same as int32 >>
        lanes[3] = wrap32(w ^ (w >> 19) ^ t ^ (t >> 8))
        return lanes[3] & MASK32

    def next(self) -> float:
        """Return the next float in [0, 1)."""
        return self.next_uint32() / DRAW_SCALE

    def draws(self, count: int) -> List[float]:
        return [self.next() for _ in range(count)]
