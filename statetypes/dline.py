"""Deadline calculations relative to a current epoch.

A deadline is the window during which proofs may be submitted. Windows are
non-overlapping ranges ``[open, close)``. The challenge epoch for a window
comes before the window opens. The current epoch need not lie within the
deadline or proving period described.
"""

from __future__ import annotations

from dataclasses import dataclass


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


@dataclass(frozen=True)
class DeadlineInfo:
    """A deadline within a proving period, seen from ``current_epoch``."""

    current_epoch: int
    period_start: int
    index: int
    open: int
    close: int
    challenge: int
    fault_cutoff: int
    period_deadlines: int
    proving_period: int
    challenge_window: int
    challenge_lookback: int
    fault_declaration_cutoff: int

    def period_started(self) -> bool:
        """Whether the proving period has begun."""
        return self.current_epoch >= self.period_start

    def period_elapsed(self) -> bool:
        """Whether the proving period has elapsed."""
        return self.current_epoch >= self.next_period_start()

    def period_end(self) -> int:
        """The last epoch in the proving period."""
        return self.period_start + self.proving_period - 1

    def next_period_start(self) -> int:
        """The first epoch in the next proving period."""
        return self.period_start + self.proving_period

    def is_open(self) -> bool:
        """Whether the deadline is currently open."""
        return self.open <= self.current_epoch < self.close

    def has_elapsed(self) -> bool:
        """Whether the deadline has already closed."""
        return self.current_epoch >= self.close

    def last(self) -> int:
        """The last epoch during which a proof may be submitted."""
        return self.close - 1

    def next_open(self) -> int:
        """The epoch at which the subsequent deadline opens."""
        return self.close

    def fault_cutoff_passed(self) -> bool:
        """Whether the deadline's fault cutoff has passed."""
        return self.current_epoch >= self.fault_cutoff

    def next_not_elapsed(self) -> DeadlineInfo:
        """Return the next instance of this deadline that has not yet elapsed."""
        if not self.has_elapsed():
            return self

        period = self.proving_period
        offset = self.period_start % period
        if offset < 0:
            offset += period
        global_period = _trunc_div(self.current_epoch, period)
        period_start = global_period * period + offset

        while period_start > self.current_epoch:
            period_start -= period

        if self.current_epoch >= period_start + (self.index + 1) * self.challenge_window:
            period_start += period

        return new_info(
            period_start,
            self.index,
            self.current_epoch,
            self.period_deadlines,
            self.proving_period,
            self.challenge_window,
            self.challenge_lookback,
            self.fault_declaration_cutoff,
        )


def new_info(
    period_start: int,
    deadline_index: int,
    current_epoch: int,
    period_deadlines: int,
    proving_period: int,
    challenge_window: int,
    challenge_lookback: int,
    fault_declaration_cutoff: int,
) -> DeadlineInfo:
    """Compute deadline information for a deadline in some proving period.

    An index at or beyond ``period_deadlines`` yields a zero-length deadline
    immediately after the last real one.
    """
    params = dict(
        current_epoch=current_epoch,
        period_start=period_start,
        index=deadline_index,
        period_deadlines=period_deadlines,
        proving_period=proving_period,
        challenge_window=challenge_window,
        challenge_lookback=challenge_lookback,
        fault_declaration_cutoff=fault_declaration_cutoff,
    )
    if deadline_index < period_deadlines:
        deadline_open = period_start + deadline_index * challenge_window
        return DeadlineInfo(
            open=deadline_open,
            close=deadline_open + challenge_window,
            challenge=deadline_open - challenge_lookback,
            fault_cutoff=deadline_open - fault_declaration_cutoff,
            **params,
        )
    after_last = period_start + proving_period
    return DeadlineInfo(
        open=after_last,
        close=after_last,
        challenge=after_last,
        fault_cutoff=0,
        **params,
    )