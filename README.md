# mostools

Host-side helpers for building a small 32-bit teaching kernel. They are
written in pure Python and have no third-party dependencies.

## What is inside

- `mostools.elf` parses 32-bit ELF files. It reads the byte order from the
  identification bytes, so both little-endian and big-endian files work.
  - `ElfHeader`, `ProgramHeader` and `SectionHeader` hold the decoded headers.
  - `is_elf_format` checks the size and the magic bytes.
  - `elf_from` returns the header only for executable files. For anything else
    it returns `None`.
  - `program_headers` and `section_headers` read the header tables. They raise
    `ValueError` if a table runs past the end of the data.
  - `segment_perm` gives the page permission bits for a segment. Every segment
    gets `PTE_V`, and writable segments also get `PTE_D`.
  - `load_segment` maps a segment one page at a time. It calls
    `map_page(va, offset, perm, src, length)` for each page. `src` holds the
    file bytes for that page, or `None` for pages that only need zero-filled
    memory.
- `mostools.readelf`
  - `section_addresses` returns `(index, address)` pairs.
  - `readelf` returns the text report with one `index:0xaddr` line per section.
  - If the input is not an ELF file, both raise `MosError` with code
    `E_NOT_EXEC`.
- `mostools.bintoc`
  - `bintoc_source` produces C source that defines
    `binary_<prefix>_<name>_size` and `binary_<prefix>_<name>_start[]`.
  - `array_name` cuts a path at its first dot.
  - Inputs of `BMAX` bytes or more raise `ValueError`.
- `mostools.fmt`
  - `vprintfmt` and `format_string` implement the kernel's `printk`-style
    formatting.
  - Supported conversions: `%b %d %D %o %O %u %U %x %X %c %s`.
  - Also supported: the `-` and `0` flags, a width, and an `l` modifier, which
    is accepted and ignored.
  - Numbers are treated as 32-bit values. An unknown conversion character is
    printed as it is.
- `mostools.bits` provides `genmask`, `genmask_ull` and `log2`, the page-table
  helpers `pdx`, `ptx`, `pte_addr`, `pte_flags`, `ppn` and `vpn`, and
  `round_up` and `round_down` for power-of-two alignments. It also defines the
  memory-layout and page-flag constants.
- `mostools.args`: `parse_args` scans leading short flags into a
  `ParsedArgs`. Flags may be bundled, and `--` ends the flags. It raises
  `UsageError` when a flag that needs a value has none.
- `mostools.errors` has three parts:
  - `ErrorCode`: the kernel's error numbers.
  - `MosError`: an exception carrying one of those codes.
  - `error_from_code`: builds a `MosError` from a status code, positive or
    negative.

## Installation

```
pip install .
```

## Command-line use

Print the index and address of each section:

```
mos-readelf path/to/program.elf
```

The output has one line per section, such as `0:0x0` or `1:0x400000`. The
command exits with status 1 in these cases:

- no file is given,
- the file cannot be read,
- the file is not an ELF file.

Convert a binary into C source:

```
mos-bintoc -f user/hello.b -o hello.c -p user
```

| Option | Meaning |
| --- | --- |
| `-f <file>` | Input binary (required). |
| `-o <file>` | Output C file (required). |
| `-p <prefix>` | Prefix for the array names (optional). |
| `-h` | Print the help text and exit. |

Any other option starting with `-` also prints the help text. Arguments that do
not start with `-` are ignored.

The command exits with status 2 when:

- `-f` or `-o` is missing,
- an option is given twice,
- an option has no value.

It exits with status 1 when a file cannot be read or written, or when the input
is too large.

## Library use

```python
from mostools.fmt import format_string
from mostools.readelf import section_addresses

format_string("%08x|%-5d|%s", 0xbeef, -3, "ok")
# '0000beef|-3   |ok'

with open("program.elf", "rb") as fh:
    for index, addr in section_addresses(fh.read()):
        print(index, hex(addr))
```

## What it does not do

These tools only inspect ELF files and generate C source. They do not do any of
the following:

- compile, link or run anything,
- build file-system disk images,
- contain the kernel itself.

`load_segment` works out which pages a segment needs. Allocating and filling
those pages is left to the `map_page` callback you supply.

## Running the tests

```
pip install .[test]
pytest
```