"""Exit codes and errors that carry them."""

from __future__ import annotations

from typing import ClassVar


class ExitCode(int):
    """An actor or system exit code."""

    OK: ClassVar[ExitCode]
    SYS_ERR_SENDER_INVALID: ClassVar[ExitCode]
    SYS_ERR_SENDER_STATE_INVALID: ClassVar[ExitCode]
    SYS_ERR_INVALID_METHOD: ClassVar[ExitCode]
    SYS_ERR_RESERVED1: ClassVar[ExitCode]
    SYS_ERR_INVALID_RECEIVER: ClassVar[ExitCode]
    SYS_ERR_INSUFFICIENT_FUNDS: ClassVar[ExitCode]
    SYS_ERR_OUT_OF_GAS: ClassVar[ExitCode]
    SYS_ERR_FORBIDDEN: ClassVar[ExitCode]
    SYS_ERROR_ILLEGAL_ACTOR: ClassVar[ExitCode]
    SYS_ERROR_ILLEGAL_ARGUMENT: ClassVar[ExitCode]
    SYS_ERR_RESERVED2: ClassVar[ExitCode]
    SYS_ERR_RESERVED3: ClassVar[ExitCode]
    SYS_ERR_RESERVED4: ClassVar[ExitCode]
    SYS_ERR_RESERVED5: ClassVar[ExitCode]
    SYS_ERR_RESERVED6: ClassVar[ExitCode]
    FIRST_ACTOR_ERROR_CODE: ClassVar[ExitCode]
    ERR_ILLEGAL_ARGUMENT: ClassVar[ExitCode]
    ERR_NOT_FOUND: ClassVar[ExitCode]
    ERR_FORBIDDEN: ClassVar[ExitCode]
    ERR_INSUFFICIENT_FUNDS: ClassVar[ExitCode]
    ERR_ILLEGAL_STATE: ClassVar[ExitCode]
    ERR_SERIALIZATION: ClassVar[ExitCode]
    FIRST_ACTOR_SPECIFIC_EXIT_CODE: ClassVar[ExitCode]

    def is_success(self) -> bool:
        return int(self) == 0

    def is_error(self) -> bool:
        return not self.is_success()

    def is_send_failure(self) -> bool:
        """Whether the code means the message could not be sent at all."""
        return int(self) in (1, 2)

    def wrap(self, msg: str, *args: object, cause: BaseException | None = None) -> ExitCodeError:
        """Return an error carrying this code and a formatted message.

        If ``cause`` is not given, the first exception among ``args`` becomes it.
        """
        if cause is None:
            cause = next((a for a in args if isinstance(a, BaseException)), None)
        message = msg % args if args else msg
        return ExitCodeError(self, message, cause)

    def __str__(self) -> str:
        name = _NAMES.get(int(self))
        if name is not None:
            return f"{name}({int(self)})"
        return str(int(self))

    def __repr__(self) -> str:
        return f"ExitCode({int(self)})"


_RESERVED = {
    "OK": ("Ok", 0),
    "SYS_ERR_SENDER_INVALID": ("SysErrSenderInvalid", 1),
    "SYS_ERR_SENDER_STATE_INVALID": ("SysErrSenderStateInvalid", 2),
    "SYS_ERR_INVALID_METHOD": ("SysErrInvalidMethod", 3),
    "SYS_ERR_RESERVED1": ("SysErrReserved1", 4),
    "SYS_ERR_INVALID_RECEIVER": ("SysErrInvalidReceiver", 5),
    "SYS_ERR_INSUFFICIENT_FUNDS": ("SysErrInsufficientFunds", 6),
    "SYS_ERR_OUT_OF_GAS": ("SysErrOutOfGas", 7),
    "SYS_ERR_FORBIDDEN": ("SysErrForbidden", 8),
    "SYS_ERROR_ILLEGAL_ACTOR": ("SysErrorIllegalActor", 9),
    "SYS_ERROR_ILLEGAL_ARGUMENT": ("SysErrorIllegalArgument", 10),
    "SYS_ERR_RESERVED2": ("SysErrReserved2", 11),
    "SYS_ERR_RESERVED3": ("SysErrReserved3", 12),
    "SYS_ERR_RESERVED4": ("SysErrReserved4", 13),
    "SYS_ERR_RESERVED5": ("SysErrReserved5", 14),
    "SYS_ERR_RESERVED6": ("SysErrReserved6", 15),
}

_NAMES = {value: name for name, value in _RESERVED.values()}

for _attr, (_name, _value) in _RESERVED.items():
    setattr(ExitCode, _attr, ExitCode(_value))

ExitCode.FIRST_ACTOR_ERROR_CODE = ExitCode(16)
ExitCode.ERR_ILLEGAL_ARGUMENT = ExitCode(16)
ExitCode.ERR_NOT_FOUND = ExitCode(17)
ExitCode.ERR_FORBIDDEN = ExitCode(18)
ExitCode.ERR_INSUFFICIENT_FUNDS = ExitCode(19)
ExitCode.ERR_ILLEGAL_STATE = ExitCode(20)
ExitCode.ERR_SERIALIZATION = ExitCode(21)
ExitCode.FIRST_ACTOR_SPECIFIC_EXIT_CODE = ExitCode(32)


class ExitCodeError(Exception):
    """An error with an attached exit code; its message omits the code."""

    def __init__(self, exit_code: ExitCode, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.exit_code = ExitCode(exit_code)
        self.message = message
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def matches(self, target: object) -> bool:
        """Whether this error stands for ``target``.

        An exit code target is compared with this error's own code only,
        shadowing any code further down the chain.
        """
        if isinstance(target, ExitCode):
            return self.exit_code == target
        return error_is(self.cause, target)


def _same(err: object, target: object) -> bool:
    if isinstance(err, ExitCode) and isinstance(target, ExitCode):
        return int(err) == int(target)
    return err is target


def error_is(err: object, target: object) -> bool:
    """Whether ``err`` or any error it was raised from is ``target``."""
    while err is not None:
        if _same(err, target):
            return True
        if isinstance(err, ExitCodeError):
            return err.matches(target)
        err = err.__cause__ if isinstance(err, BaseException) else None
    return False


def unwrap(err: object, default: ExitCode) -> ExitCode:
    """Return the first exit code found along the cause chain of ``err``."""
    while err is not None:
        if isinstance(err, ExitCode):
            return err
        if isinstance(err, ExitCodeError):
            return err.exit_code
        err = err.__cause__ if isinstance(err, BaseException) else None
    return default