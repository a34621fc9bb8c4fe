"""Kernel error codes and the exception that carries them."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Error numbers shared by the kernel and user space."""

    E_UNSPECIFIED = 1
    E_BAD_ENV = 2
    E_INVAL = 3
    E_NO_MEM = 4
    E_NO_SYS = 5
    E_NO_FREE_ENV = 6
    E_IPC_NOT_RECV = 7
    E_NO_DISK = 8
    E_MAX_OPEN = 9
    E_NOT_FOUND = 10
    E_BAD_PATH = 11
    E_FILE_EXISTS = 12
    E_NOT_EXEC = 13
    E_NOT_REMOVE = 14


_DESCRIPTIONS = {
    ErrorCode.E_UNSPECIFIED: "unspecified or unknown problem",
    ErrorCode.E_BAD_ENV: "environment doesn't exist or cannot be used",
    ErrorCode.E_INVAL: "invalid parameter",
    ErrorCode.E_NO_MEM: "request failed due to memory shortage",
    ErrorCode.E_NO_SYS: "invalid syscall number",
    ErrorCode.E_NO_FREE_ENV: "no free environment left",
    ErrorCode.E_IPC_NOT_RECV: "target environment is not receiving",
    ErrorCode.E_NO_DISK: "no free space left on disk",
    ErrorCode.E_MAX_OPEN: "too many files are open",
    ErrorCode.E_NOT_FOUND: "file or block not found",
    ErrorCode.E_BAD_PATH: "bad path",
    ErrorCode.E_FILE_EXISTS: "file already exists",
    ErrorCode.E_NOT_EXEC: "file is not a valid executable",
    ErrorCode.E_NOT_REMOVE: "file cannot be removed",
}


class MosError(Exception):
    """An operation failed with one of the :class:`ErrorCode` values."""

    def __init__(self, code: ErrorCode | int, message: str | None = None) -> None:
        self.code = ErrorCode(code)
        self.message = message if message is not None else _DESCRIPTIONS[self.code]
        super().__init__(f"{self.code.name}: {self.message}")


def error_from_code(code: int) -> MosError:
    """Build the exception for a status code; negative codes are accepted as well."""
    number = abs(int(code))
    if number == 0:
        raise ValueError("status code 0 means success, not an error")
    try:
        error_code = ErrorCode(number)
    except ValueError:
        raise ValueError(f"unknown error code {code}") from None
    return MosError(error_code, _DESCRIPTIONS[error_code])