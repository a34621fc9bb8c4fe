"""Turn a binary file into C source that embeds it as a byte array."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from mostools.args import UsageError

BMAX = 4 << 25

HELP = (
    "convert ELF binary file to C file.\n"
    " -h            print this message\n"
    " -f <file>     tell the binary file  (input)\n"
    " -o <file>     tell the c file       (output)\n"
    " -p <prefix>   add prefix to the array name\n"
)


def array_name(path: str) -> str:
    """The name used for the arrays: ``path`` cut at its first dot."""
    return path.split(".", 1)[0]


def bintoc_source(data: bytes, name: str, prefix: str = "") -> str:
    """C source declaring the size and the bytes of ``data``."""
    if len(data) >= BMAX:
        raise ValueError(f"binary too large: {len(data)} bytes (limit {BMAX})")
    symbol = f"binary_{prefix}_{name}"
    head = f"unsigned int {symbol}_size = {len(data)};\nunsigned char {symbol}_start[] = {{"
    body = ",".join(f"0x{byte:x}" for byte in data)
    tail = "}" if data else ""
    return head + body + tail + ";\n"


def _parse(args: list[str]) -> dict[str, str | None] | None:
    chosen: dict[str, str | None] = {"-f": None, "-o": None, "-p": None}
    items = iter(args)
    for arg in items:
        if not arg.startswith("-"):
            continue
        if arg not in chosen:
            return None
        value = next(items, None)
        if value is None:
            raise UsageError(f"option {arg} requires a value")
        if chosen[arg] is not None:
            raise UsageError(f"option {arg} given more than once")
        chosen[arg] = value
    return chosen


def main(argv: Sequence[str] | None = None) -> int:
    """Convert the file given with -f into C source written to the file given with -o."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        chosen = _parse(args)
        if chosen is None:
            sys.stdout.write(HELP)
            return 0
        bin_file, out_file = chosen["-f"], chosen["-o"]
        if bin_file is None:
            raise UsageError("no input file given (-f)")
        if out_file is None:
            raise UsageError("no output file given (-o)")
    except UsageError as exc:
        print(f"bintoc: {exc}", file=sys.stderr)
        return 2
    try:
        with open(bin_file, "rb") as handle:
            data = handle.read()
        source = bintoc_source(data, array_name(bin_file), chosen["-p"] or "")
        with open(out_file, "w", encoding="ascii") as handle:
            handle.write(source)
    except OSError as exc:
        print(f"bintoc: {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"bintoc: {exc}", file=sys.stderr)
        return 1
    return 0