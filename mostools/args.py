"""Minimal short-option command-line scanner."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


class UsageError(ValueError):
    """A flag that needs a value was given none."""


@dataclass
class ParsedArgs:
    """Flags in the order seen, each with its value or None, and the remaining operands."""

    options: list[tuple[str, str | None]] = field(default_factory=list)
    operands: list[str] = field(default_factory=list)


def parse_args(argv: Sequence[str], value_flags: Iterable[str] = "") -> ParsedArgs:
    """Scan leading ``-x`` style flags from ``argv`` (program name excluded).

    Flags may be bundled (``-ab``). A flag in ``value_flags`` takes the rest of its
    argument, or the next argument when nothing follows it. ``--`` ends the flags and
    is dropped; a lone ``-`` or the first non-flag argument ends them and is kept.
    """
    takes_value = set(value_flags)
    result = ParsedArgs()
    args = list(argv)
    index = 0
    while index < len(args):
        arg = args[index]
        if len(arg) < 2 or arg[0] != "-":
            break
        if arg == "--":
            index += 1
            break
        rest = arg[1:]
        while rest:
            flag, rest = rest[0], rest[1:]
            if flag not in takes_value:
                result.options.append((flag, None))
                continue
            if rest:
                value = rest
            elif index + 1 < len(args):
                index += 1
                value = args[index]
            else:
                raise UsageError(f"option -{flag} requires a value")
            result.options.append((flag, value))
            rest = ""
        index += 1
    result.operands = args[index:]
    return result