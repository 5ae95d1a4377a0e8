"""Error types raised when beer data cannot be obtained."""

from __future__ import annotations


def _format(message: str, args: tuple) -> str:
    return message % args if args else message


class BadResponseError(Exception):
    """A response that could not be used, tagged with where it was noticed."""

    def __init__(self, msg: str, file: str, line: int) -> None:
        super().__init__(msg)
        self.msg = msg
        self.file = file
        self.line = line

    def __str__(self) -> str:
        return f"{self.file}: {self.line}: {self.msg}"


class DataUnreachableError(Exception):
    """The beer data source could not be reached or understood."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


def wrap_data_unreachable(
    err: BaseException | None, message: str, *args: object
) -> DataUnreachableError:
    """Return a DataUnreachableError whose message is ``message % args`` and whose cause is ``err``."""
    return DataUnreachableError(_format(message, args), err)


def new_data_unreachable(message: str, *args: object) -> DataUnreachableError:
    """Return a DataUnreachableError with the message ``message % args``."""
    return DataUnreachableError(_format(message, args))


def is_data_unreachable(err: BaseException | None) -> bool:
    """Report whether ``err``, or an error it was explicitly raised from, is a DataUnreachableError."""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, DataUnreachableError):
            return True
        seen.add(id(err))
        err = err.__cause__
    return False