import pytest

from mostools import bits
from mostools.bits import (
    genmask,
    genmask_ull,
    log2,
    pdx,
    pte_addr,
    pte_flags,
    ppn,
    ptx,
    round_down,
    round_up,
    vpn,
)


def test_genmask_ull_documented_example():
    assert genmask_ull(39, 21) == 0x000000FFFFE00000


def test_genmask_full_word():
    assert genmask(31, 0) == 0xFFFFFFFF


@pytest.mark.parametrize("h,l", [(0, 0), (7, 3), (31, 12), (15, 15)])
def test_genmask_shape(h, l):
    mask = genmask(h, l)
    assert bin(mask).count("1") == h - l + 1
    assert mask & (1 << l)
    assert mask >> (h + 1) == 0


def test_genmask_out_of_range():
    with pytest.raises(ValueError):
        genmask(32, 0)
    with pytest.raises(ValueError):
        genmask_ull(64, 0)


@pytest.mark.parametrize("k", range(32))
def test_log2_powers(k):
    assert log2(1 << k) == k
    assert log2((1 << (k + 1)) - 1) == k


def test_log2_small_values():
    assert log2(0) == 0
    assert log2(1) == 0


@pytest.mark.parametrize("va", [0, 0x00400000, 0x7F3FDABC, bits.UVPT, 0xFFFFFFFF])
def test_index_decomposition(va):
    assert (pdx(va) << 22) | (ptx(va) << 12) | (va & 0xFFF) == va
    assert vpn(va) == va >> 12


@pytest.mark.parametrize("pte", [0, bits.PTE_V | bits.PTE_D | 0x12345000, 0xFFFFFFFF])
def test_pte_split(pte):
    assert pte_addr(pte) | pte_flags(pte) == pte
    assert pte_addr(pte) & pte_flags(pte) == 0
    assert ppn(pte) << 12 == pte_addr(pte)


def test_pte_flags_are_above_software_bits():
    assert bits.PTE_V >> bits.PTE_HARDFLAG_SHIFT == 2
    assert bits.PTE_COW & pte_flags(bits.PTE_V) == 0


@pytest.mark.parametrize("a", [0, 1, 4095, 4096, 4097, 0x7F3FD123])
def test_rounding_invariants(a):
    up = round_up(a, bits.PAGE_SIZE)
    down = round_down(a, bits.PAGE_SIZE)
    assert up % bits.PAGE_SIZE == 0 and down % bits.PAGE_SIZE == 0
    assert down <= a <= up
    assert up - a < bits.PAGE_SIZE and a - down < bits.PAGE_SIZE


def test_rounding_requires_power_of_two():
    with pytest.raises(ValueError):
        round_up(10, 3)
    with pytest.raises(ValueError):
        round_down(10, 0)