"""Bit masks, page-table index helpers and address rounding."""

from __future__ import annotations

BITS_PER_LONG = 32
BITS_PER_LONG_LONG = 64

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1

NASID = 256
PAGE_SIZE = 4096
PTMAP = PAGE_SIZE
PDMAP = 4 * 1024 * 1024
PGSHIFT = 12
PDSHIFT = 22

PTE_HARDFLAG_SHIFT = 6
PTE_G = 0x0001 << PTE_HARDFLAG_SHIFT
PTE_V = 0x0002 << PTE_HARDFLAG_SHIFT
PTE_D = 0x0004 << PTE_HARDFLAG_SHIFT
PTE_C_CACHEABLE = 0x0018 << PTE_HARDFLAG_SHIFT
PTE_C_UNCACHEABLE = 0x0010 << PTE_HARDFLAG_SHIFT
PTE_COW = 0x0001
PTE_LIBRARY = 0x0002

KUSEG = 0x00000000
KSEG0 = 0x80000000
KSEG1 = 0xA0000000
KSEG2 = 0xC0000000

KERNBASE = 0x80020000
ULIM = 0x80000000
KSTACKTOP = ULIM + PDMAP
UVPT = ULIM - PDMAP
UPAGES = UVPT - PDMAP
UENVS = UPAGES - PDMAP
UTOP = UENVS
UXSTACKTOP = UTOP
USTACKTOP = UTOP - 2 * PTMAP
UTEXT = PDMAP
UCOW = UTEXT - PTMAP
UTEMP = UCOW - PTMAP


def _mask(h: int, l: int, bits: int) -> int:
    if not (0 <= h < bits and 0 <= l < bits):
        raise ValueError(f"bit positions must lie in [0, {bits - 1}]")
    full = (1 << bits) - 1
    return ((full << l) & full) & (full >> (bits - 1 - h))


def genmask(h: int, l: int) -> int:
    """32-bit mask with bits ``l`` through ``h`` set."""
    return _mask(h, l, BITS_PER_LONG)


def genmask_ull(h: int, l: int) -> int:
    """64-bit mask with bits ``l`` through ``h`` set."""
    return _mask(h, l, BITS_PER_LONG_LONG)


def log2(n: int) -> int:
    """Floor of log2 for a 32-bit value; 0 for values below 2."""
    if n < 2:
        return 0
    return min(n.bit_length() - 1, BITS_PER_LONG - 1)


def pdx(va: int) -> int:
    """Page directory index of a virtual address."""
    return ((va & _MASK32) >> PDSHIFT) & 0x03FF


def ptx(va: int) -> int:
    """Page table index of a virtual address."""
    return ((va & _MASK32) >> PGSHIFT) & 0x03FF


def pte_addr(pte: int) -> int:
    """Physical frame address held in a page table entry."""
    return pte & _MASK32 & ~0xFFF


def pte_flags(pte: int) -> int:
    """Flag bits of a page table entry."""
    return pte & 0xFFF


def ppn(pa: int) -> int:
    """Physical page number."""
    return (pa & _MASK32) >> PGSHIFT


def vpn(va: int) -> int:
    """Virtual page number."""
    return (va & _MASK32) >> PGSHIFT


def _check_power_of_two(n: int) -> None:
    if n <= 0 or n & (n - 1):
        raise ValueError(f"alignment {n} is not a power of two")


def round_up(a: int, n: int) -> int:
    """Round ``a`` up to a multiple of the power of two ``n`` (32-bit wrap)."""
    _check_power_of_two(n)
    return ((a & _MASK32) + n - 1) & ~(n - 1) & _MASK32


def round_down(a: int, n: int) -> int:
    """Round ``a`` down to a multiple of the power of two ``n``."""
    _check_power_of_two(n)
    return (a & _MASK32) & ~(n - 1)