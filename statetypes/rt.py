"""Runtime-facing actor interface and log levels."""

from __future__ import annotations

import abc
import enum
from typing import Any, Callable, Optional, Sequence


class LogLevel(enum.IntEnum):
    """Importance of a log message."""

    DEBUG = -1
    INFO = 0
    WARN = 1
    ERROR = 2


class VMActor(abc.ABC):
    """A concrete actor implementation usable by a virtual machine."""

    @abc.abstractmethod
    def exports(self) -> Sequence[Optional[Callable[..., Any]]]:
        """Methods indexed by method number; skipped numbers are None."""

    @abc.abstractmethod
    def code(self) -> Any:
        """The code identifier of this actor."""

    @abc.abstractmethod
    def state(self) -> Any:
        """A fresh state object for decoding this actor's state."""


def is_singleton_actor(actor: object) -> bool:
    """Whether the actor declares itself a singleton (cannot be constructed)."""
    check = getattr(actor, "is_singleton", None)
    return callable(check) and bool(check())