"""
Seeded Mersenne Twister

A 32-bit MT19937 generator whose output is bit-for-bit identical to the
generator the puzzle boards were originally drawn with. Puzzle ids seed it,
so any change to the arithmetic here changes every published puzzle.
"""

import time
from typing import List, Optional, Sequence, Union

STATE_SIZE = 624
SHIFT_SIZE = 397
MATRIX_A = 0x9908b0df
UPPER_MASK = 0x80000000
LOWER_MASK = 0x7fffffff
UINT32_MASK = 0xffffffff


class MersenneTwister:
    """
    Stateful MT19937 generator.

    The state is 624 unsigned 32-bit words plus a cursor pointing at the next
    word to temper. The cursor reaching 624 triggers a twist before the next
    draw. A generator is owned by one caller; draws mutate it in place.
    """

    def __init__(self, seed: Optional[Union[int, Sequence[int]]] = None):
        """
        Args:
            seed: Integer seed, or a state previously returned by save().
                Defaults to the current time in milliseconds.
        """
        if seed is None:
            seed = int(time.time() * 1000)

        self.mt: List[int] = [0] * STATE_SIZE
        if isinstance(seed, int):
            self._seed_from_int(seed)
        else:
            self._restore(seed)

    def _seed_from_int(self, seed: int) -> None:
        mt = self.mt
        mt[0] = seed & UINT32_MASK
        for i in range(1, STATE_SIZE):
            prev = mt[i - 1] ^ (mt[i - 1] >> 30)
            mt[i] = (1812433253 * prev + i) & UINT32_MASK
        self.index = STATE_SIZE

    def _restore(self, state: Sequence[int]) -> None:
        if len(state) != STATE_SIZE + 1:
            raise ValueError(f"Saved state must hold {STATE_SIZE + 1} values, got {len(state)}")

        index = int(state[0])
        if not 0 <= index <= STATE_SIZE:
            raise ValueError(f"Saved cursor {index} outside [0, {STATE_SIZE}]")

        self.index = index
        self.mt = [int(word) & UINT32_MASK for word in state[1:]]

    def _twist(self) -> None:
        mt = self.mt
        for i in range(STATE_SIZE):
            y = (mt[i] & UPPER_MASK) | (mt[(i + 1) % STATE_SIZE] & LOWER_MASK)
            value = mt[(i + SHIFT_SIZE) % STATE_SIZE] ^ (y >> 1)
            if y & 0x1:
                value ^= MATRIX_A
            mt[i] = value
        self.index = 0

    def u32(self) -> int:
        """Return the next unsigned 32-bit integer."""
        if self.index >= STATE_SIZE:
            self._twist()

        y = self.mt[self.index]
        self.index += 1

        # Tempering
        y ^= y >> 11
        y ^= (y << 7) & 0x9d2c5680
        y ^= (y << 15) & 0xefc60000
        y ^= y >> 18
        return y & UINT32_MASK

    def f32_ii(self) -> float:
        """Float in [0, 1]."""
        return self.u32() / 0xffffffff

    def f32_ix(self) -> float:
        """Float in [0, 1)."""
        return self.u32() / 0x100000000

    def f32_xx(self) -> float:
        """Float in (0, 1)."""
        return (self.u32() + 0.5) / 0x100000000

    def u53(self) -> int:
        """53-bit integer from two draws, the first supplying the high bits."""
        high = self.u32() >> 5
        low = self.u32() >> 6
        return high * 67108864 + low

    def f64_ix(self) -> float:
        """Float in [0, 1) with 53 bits of precision."""
        return self.u53() / 0x20000000000000

    def save(self) -> List[int]:
        """
        Export the generator state.

        Returns:
            List of 625 values: the cursor followed by the 624 state words.
            Passing it back to MersenneTwister() resumes the same sequence.
        """
        return [self.index] + list(self.mt)
