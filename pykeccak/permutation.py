# Keccak-f[1600] on a flat list of 25 lanes, lane (x, y) at index x + 5*y.

from __future__ import annotations
from pykeccak.constants import RHO, ROUND_CONSTANTS, LANES


MASK64 = 0xffffffffffffffff

State = list[int]


def rol64(x: int, n: int) -> int:
    n %= 64
    return ((x << n) | (x >> (64 - n))) & MASK64


def theta(A: State) -> None:
    C = [A[x] ^ A[x + 5] ^ A[x + 10] ^ A[x + 15] ^ A[x + 20] for x in range(5)]
    D = [C[(x - 1) % 5] ^ rol64(C[(x + 1) % 5], 1) for x in range(5)]
    for i in range(LANES):
        A[i] ^= D[i % 5]


def rho(A: State) -> None:
    for i in range(LANES):
        A[i] = rol64(A[i], RHO[i])


def pi(A: State) -> None:
    B = A[:]
    for y in range(5):
        for x in range(5):
            A[y + 5 * ((2 * x + 3 * y) % 5)] = B[x + 5 * y]


def chi(A: State) -> None:
    B = A[:]
    for y in range(0, LANES, 5):
        for x in range(5):
            A[x + y] = B[x + y] ^ (~B[(x + 1) % 5 + y] & B[(x + 2) % 5 + y])


def iota(A: State, rc: int) -> None:
    A[0] ^= rc


def keccak_f1600(A: State) -> None:
    """Apply the 24-round permutation to ``A`` in place."""
    if len(A) != LANES:
        raise ValueError('Invalid state size.')
    for rc in ROUND_CONSTANTS:
        theta(A)
        rho(A)
        pi(A)
        chi(A)
        iota(A, rc)
