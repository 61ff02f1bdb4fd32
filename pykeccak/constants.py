# https://keccak.team/keccak_specs_summary.html
# https://nvlpubs.nist.gov/nistpubs/FIPS/NIST.FIPS.202.pdf

from __future__ import annotations
from typing import Generator


ROUNDS = 24

LANES = 25


# Rotation offsets, indexed x + 5*y
RHO = (
    0,  1,  62, 28, 27,
    36, 44, 6,  55, 20,
    3,  10, 43, 25, 39,
    41, 45, 15, 21, 8,
    18, 2,  61, 56, 14
)


# x^8 + x^6 + x^5 + x^4 + 1
LFSR_FEEDBACK = 0x171


def lfsr_bits() -> Generator[int, None, None]:
    """Output bits of the round-constant LFSR, starting from the seed 1."""
    r = 1
    while True:
        yield r & 1
        r <<= 1
        if r & 0x100:
            r ^= LFSR_FEEDBACK


def round_constants(rounds: int = ROUNDS) -> list[int]:
    """Build the iota constants bit-by-bit from one continuous LFSR run.

    Round ``i`` consumes seven consecutive LFSR bits; bit ``j`` of those is
    placed at lane position ``2**j - 1``.
    """
    bits = lfsr_bits()
    out: list[int] = []
    for _ in range(rounds):
        rc = 0
        for j in range(7):
            if next(bits):
                rc |= 1 << ((1 << j) - 1)
        out.append(rc)
    return out


ROUND_CONSTANTS = tuple(round_constants())
