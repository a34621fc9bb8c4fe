"""List the address of every section of an ELF file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from mostools.elf import ElfHeader, is_elf_format, section_headers
from mostools.errors import ErrorCode, MosError


def section_addresses(binary: bytes) -> list[tuple[int, int]]:
    """Pairs of section index and section address, in table order."""
    if not is_elf_format(binary):
        raise MosError(ErrorCode.E_NOT_EXEC, "not an elf file")
    ehdr = ElfHeader.from_bytes(bytes(binary))
    return [(index, sh.addr) for index, sh in enumerate(section_headers(binary, ehdr))]


def readelf(binary: bytes) -> str:
    """The report for ``binary``: one ``index:0xaddr`` line per section."""
    return "".join(f"{index}:0x{addr:x}\n" for index, addr in section_addresses(binary))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the section addresses of the file named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: readelf <elf-file>", file=sys.stderr)
        return 1
    path = args[0]
    try:
        with open(path, "rb") as handle:
            binary = handle.read()
    except OSError as exc:
        print(f"{path}: {exc.strerror}", file=sys.stderr)
        return 1
    try:
        report = readelf(binary)
    except MosError as exc:
        print(exc.message, file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    sys.stdout.write(report)
    return 0