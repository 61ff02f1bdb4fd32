from pykeccak import permutation
from pykeccak.constants import ROUND_CONSTANTS, RHO
from random import Random

import pytest


MASK = 2**64 - 1


def random_state(rng: Random) -> list[int]:
    return [rng.getrandbits(64) for _ in range(25)]


def test_rol64():
    assert permutation.rol64(1, 0) == 1
    assert permutation.rol64(1, 1) == 2
    assert permutation.rol64(1 << 63, 1) == 1
    assert permutation.rol64(0x8000000000000001, 4) == 0x18
    assert permutation.rol64(0x0123456789abcdef, 64) == 0x0123456789abcdef
    assert permutation.rol64(0x0123456789abcdef, 8) == 0x23456789abcdef01


def test_keccak_f1600_zero_state():
    # KeccakF-1600 intermediate values, permutation of the all-zero state
    A = [0] * 25
    permutation.keccak_f1600(A)
    assert A[0] == 0xF1258F7940E1DDE7
    assert A[1] == 0x84D5CCF933C0478A
    assert A[2] == 0xD598261EA65AA9EE
    assert all(0 <= lane <= MASK for lane in A)


def test_keccak_f1600_deterministic_and_in_place():
    rng = Random(1600)
    A = random_state(rng)
    B = A[:]
    ref = A
    permutation.keccak_f1600(A)
    permutation.keccak_f1600(B)
    assert A is ref
    assert A == B


def test_keccak_f1600_invalid_size():
    with pytest.raises(ValueError):
        permutation.keccak_f1600([0] * 24)
    with pytest.raises(ValueError):
        permutation.keccak_f1600([0] * 26)


def test_theta_column_parity():
    rng = Random(1)
    A = random_state(rng)
    before = A[:]
    permutation.theta(A)
    for x in range(5):
        c_left = 0
        c_right = 0
        for y in range(5):
            c_left ^= before[(x - 1) % 5 + 5 * y]
            c_right ^= before[(x + 1) % 5 + 5 * y]
        d = c_left ^ permutation.rol64(c_right, 1)
        for y in range(5):
            assert A[x + 5 * y] == before[x + 5 * y] ^ d


def test_rho_offsets():
    A = [1] * 25
    permutation.rho(A)
    assert A == [1 << RHO[i] for i in range(25)]


def test_pi_moves_lanes():
    A = list(range(25))
    permutation.pi(A)
    for y in range(5):
        for x in range(5):
            assert A[y + 5 * ((2 * x + 3 * y) % 5)] == x + 5 * y
    # (0, 0) is a fixed point
    assert A[0] == 0


def test_chi_reads_pre_step_lanes():
    rng = Random(2)
    A = random_state(rng)
    before = A[:]
    permutation.chi(A)
    for y in range(5):
        for x in range(5):
            a = before[x + 5 * y]
            b = before[(x + 1) % 5 + 5 * y]
            c = before[(x + 2) % 5 + 5 * y]
            assert A[x + 5 * y] == a ^ ((b ^ MASK) & c)


def test_iota_only_touches_first_lane():
    A = [0] * 25
    permutation.iota(A, ROUND_CONSTANTS[1])
    assert A[0] == 0x8082
    assert not any(A[1:])


def test_round_order():
    rng = Random(3)
    A = random_state(rng)
    B = A[:]
    permutation.keccak_f1600(A)
    for rc in ROUND_CONSTANTS:
        permutation.theta(B)
        permutation.rho(B)
        permutation.pi(B)
        permutation.chi(B)
        permutation.iota(B, rc)
    assert A == B


def test_distinct_inputs_distinct_outputs():
    A = [0] * 25
    B = [0] * 25
    B[24] = 1
    permutation.keccak_f1600(A)
    permutation.keccak_f1600(B)
    assert A != B
