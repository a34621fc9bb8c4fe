"""ELF32 header parsing and segment loading."""

from __future__ import annotations

import struct
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mostools.bits import PAGE_SIZE, PTE_D, PTE_V, round_down

EI_NIDENT = 16
ELFMAG = b"\x7fELF"
EI_DATA = 5
ELFDATA2MSB = 2
ET_EXEC = 2

PT_NULL = 0
PT_LOAD = 1
PT_DYNAMIC = 2
PT_INTERP = 3
PT_NOTE = 4
PT_SHLIB = 5
PT_PHDR = 6
PT_NUM = 7
PT_LOOS = 0x60000000
PT_HIOS = 0x6FFFFFFF
PT_LOPROC = 0x70000000
PT_HIPROC = 0x7FFFFFFF

PF_X = 1 << 0
PF_W = 1 << 1
PF_R = 1 << 2
PF_MASKPROC = 0xF0000000

_EHDR_FMT = "16sHHIIIIIHHHHHH"
_PHDR_FMT = "IIIIIIII"
_SHDR_FMT = "IIIIIIIIII"

EHDR_SIZE = struct.calcsize("<" + _EHDR_FMT)
PHDR_SIZE = struct.calcsize("<" + _PHDR_FMT)
SHDR_SIZE = struct.calcsize("<" + _SHDR_FMT)

MapPage = Callable[[int, int, int, "bytes | None", int], Any]


def _byte_order(ident: bytes) -> str:
    return ">" if ident[EI_DATA] == ELFDATA2MSB else "<"


@dataclass(frozen=True)
class ElfHeader:
    """The ELF file header found at the start of every ELF file."""

    ident: bytes
    type: int
    machine: int
    version: int
    entry: int
    phoff: int
    shoff: int
    flags: int
    ehsize: int
    phentsize: int
    phnum: int
    shentsize: int
    shnum: int
    shstrndx: int

    @classmethod
    def from_bytes(cls, data: bytes) -> ElfHeader:
        """Decode a header from the first bytes of ``data``."""
        if len(data) < EHDR_SIZE:
            raise ValueError("data too short for an ELF header")
        order = _byte_order(data[:EI_NIDENT])
        return cls(*struct.unpack_from(order + _EHDR_FMT, data, 0))

    @property
    def byte_order(self) -> str:
        """The struct byte-order prefix of this file."""
        return _byte_order(self.ident)


@dataclass(frozen=True)
class ProgramHeader:
    """A program segment header."""

    type: int
    offset: int
    vaddr: int
    paddr: int
    filesz: int
    memsz: int
    flags: int
    align: int


@dataclass(frozen=True)
class SectionHeader:
    """A section header."""

    name: int
    type: int
    flags: int
    addr: int
    offset: int
    size: int
    link: int
    info: int
    addralign: int
    entsize: int


def is_elf_format(binary: bytes) -> bool:
    """Whether ``binary`` is large enough for a header and starts with the ELF magic."""
    return len(binary) >= EHDR_SIZE and bytes(binary[:4]) == ELFMAG


def elf_from(binary: bytes) -> ElfHeader | None:
    """The header of ``binary`` if it is an executable ELF file, otherwise None."""
    if not is_elf_format(binary):
        return None
    ehdr = ElfHeader.from_bytes(bytes(binary))
    if ehdr.type != ET_EXEC:
        return None
    return ehdr


def _table(binary: bytes, start: int, count: int, step: int, fmt: str, order: str, what: str):
    size = struct.calcsize(order + fmt)
    entries = []
    for index in range(count):
        offset = start + index * step
        if offset + size > len(binary):
            raise ValueError(f"{what} table runs past the end of the file")
        entries.append(struct.unpack_from(order + fmt, binary, offset))
    return entries


def program_headers(binary: bytes, ehdr: ElfHeader) -> list[ProgramHeader]:
    """All program headers listed by ``ehdr``."""
    rows = _table(
        binary, ehdr.phoff, ehdr.phnum, ehdr.phentsize, _PHDR_FMT, ehdr.byte_order, "program header"
    )
    return [ProgramHeader(*row) for row in rows]


def section_headers(binary: bytes, ehdr: ElfHeader) -> list[SectionHeader]:
    """All section headers listed by ``ehdr``."""
    rows = _table(
        binary, ehdr.shoff, ehdr.shnum, ehdr.shentsize, _SHDR_FMT, ehdr.byte_order, "section header"
    )
    return [SectionHeader(*row) for row in rows]


def segment_perm(ph: ProgramHeader) -> int:
    """Page permission bits for a segment: valid, plus dirty when writable."""
    perm = PTE_V
    if ph.flags & PF_W:
        perm |= PTE_D
    return perm


def load_segment(ph: ProgramHeader, binary: bytes, map_page: MapPage) -> None:
    """Map a segment page by page through ``map_page``.

    ``binary`` is the whole file image. ``map_page(va, offset, perm, src, length)``
    is called for each page; ``src`` holds the file bytes to copy, or None for pages
    that only need zero-filled memory. Exceptions from ``map_page`` propagate.
    """
    if ph.offset + ph.filesz > len(binary):
        raise ValueError("segment data runs past the end of the file")
    data = bytes(binary[ph.offset : ph.offset + ph.filesz])
    va = ph.vaddr
    bin_size = ph.filesz
    sgsize = ph.memsz
    perm = segment_perm(ph)

    offset = va - round_down(va, PAGE_SIZE)
    if offset != 0:
        length = min(bin_size, PAGE_SIZE - offset)
        map_page(va, offset, perm, data[:length], length)

    i = min(bin_size, PAGE_SIZE - offset) if offset else 0
    while i < bin_size:
        length = min(bin_size - i, PAGE_SIZE)
        map_page(va + i, 0, perm, data[i : i + length], length)
        i += PAGE_SIZE

    while i < sgsize:
        map_page(va + i, 0, perm, None, min(sgsize - i, PAGE_SIZE))
        i += PAGE_SIZE