# console_scout/models.py
"""
Data models for ConsoleScout: signal records, the per-run report and the verdict.
"""
from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Optional, Sequence, Union


class SignalKind(str, enum.Enum):
    """Closed set of channels a record can come from; one report bucket per kind."""

    CONSOLE_ERROR = "console_error"
    CONSOLE_WARNING = "console_warning"
    UNCAUGHT_EXCEPTION = "uncaught_exception"
    NETWORK_FAILURE = "network_failure"


class Verdict(str, enum.Enum):
    CLEAN = "clean"
    WARNINGS_ONLY = "warnings_only"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Script position reported together with a console message."""

    url: str
    line: int
    column: int = 0


@dataclass(frozen=True, slots=True)
class ConsoleError:
    kind: ClassVar[SignalKind] = SignalKind.CONSOLE_ERROR

    message: str
    location: Optional[SourceLocation] = None
    observed_at: float = field(default_factory=time.time, compare=False)


@dataclass(frozen=True, slots=True)
class ConsoleWarning:
    kind: ClassVar[SignalKind] = SignalKind.CONSOLE_WARNING

    message: str
    location: Optional[SourceLocation] = None
    observed_at: float = field(default_factory=time.time, compare=False)


@dataclass(frozen=True, slots=True)
class UncaughtException:
    kind: ClassVar[SignalKind] = SignalKind.UNCAUGHT_EXCEPTION

    message: str
    stack_trace: Optional[str] = None
    observed_at: float = field(default_factory=time.time, compare=False)


@dataclass(frozen=True, slots=True)
class NetworkFailure:
    """A request that failed below HTTP: DNS, reset, abort, timeout."""

    kind: ClassVar[SignalKind] = SignalKind.NETWORK_FAILURE

    url: str
    method: str
    error_text: str
    observed_at: float = field(default_factory=time.time, compare=False)


SignalRecord = Union[ConsoleError, ConsoleWarning, UncaughtException, NetworkFailure]


class Report:
    """
    Four append-only buckets of signal records, in observation order.

    The collector appends while the page is observed; the engine calls
    :meth:`freeze` once the browser is gone, after which the report is read-only.
    """

    __slots__ = ("_buckets", "_frozen")

    def __init__(self) -> None:
        self._buckets: Dict[SignalKind, List[SignalRecord]] = {kind: [] for kind in SignalKind}
        self._frozen = False

    def add(self, record: SignalRecord) -> None:
        if self._frozen:
            raise RuntimeError("report is frozen, observation window is over")
        self._buckets[record.kind].append(record)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def bucket(self, kind: SignalKind) -> Sequence[SignalRecord]:
        return tuple(self._buckets[kind])

    @property
    def console_errors(self) -> Sequence[ConsoleError]:
        return self.bucket(SignalKind.CONSOLE_ERROR)  # type: ignore[return-value]

    @property
    def console_warnings(self) -> Sequence[ConsoleWarning]:
        return self.bucket(SignalKind.CONSOLE_WARNING)  # type: ignore[return-value]

    @property
    def uncaught_exceptions(self) -> Sequence[UncaughtException]:
        return self.bucket(SignalKind.UNCAUGHT_EXCEPTION)  # type: ignore[return-value]

    @property
    def network_failures(self) -> Sequence[NetworkFailure]:
        return self.bucket(SignalKind.NETWORK_FAILURE)  # type: ignore[return-value]

    @property
    def hard_error_count(self) -> int:
        return (
            len(self._buckets[SignalKind.CONSOLE_ERROR])
            + len(self._buckets[SignalKind.UNCAUGHT_EXCEPTION])
            + len(self._buckets[SignalKind.NETWORK_FAILURE])
        )

    @property
    def warning_count(self) -> int:
        return len(self._buckets[SignalKind.CONSOLE_WARNING])

    def __len__(self) -> int:
        return sum(len(records) for records in self._buckets.values())

    def __repr__(self) -> str:
        counts = ", ".join(f"{kind.value}={len(recs)}" for kind, recs in self._buckets.items())
        return f"Report({counts}, frozen={self._frozen})"


__all__ = [
    "SignalKind",
    "Verdict",
    "SourceLocation",
    "ConsoleError",
    "ConsoleWarning",
    "UncaughtException",
    "NetworkFailure",
    "SignalRecord",
    "Report",
]
