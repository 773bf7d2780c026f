"""Matcher outcomes and the audit result record."""

from __future__ import annotations

from typing import Literal

from consistently_interactive.config import REQUIRED_QUIET_WINDOW

from .intervals import CamelModel, QuietPeriod

Culprit = Literal["Network", "CPU"]


class MatchResult(CamelModel):
    """The first mutually quiet CPU/network pair, plus the filtered candidates."""

    cpu_quiet_period: QuietPeriod
    network_quiet_period: QuietPeriod
    cpu_quiet_periods: list[QuietPeriod]
    network_quiet_periods: list[QuietPeriod]


class QuietWindowNotFound(CamelModel):
    """The matcher ran out of candidates in one domain before a pair qualified."""

    culprit: Culprit
    required_quiet_window_ms: float = REQUIRED_QUIET_WINDOW
    cpu_quiet_periods: list[QuietPeriod]
    network_quiet_periods: list[QuietPeriod]

    @property
    def message(self) -> str:
        seconds = f"{self.required_quiet_window_ms / 1000:g}"
        return f"{self.culprit} did not quiet for at least {seconds}s before the end of the trace."


class AuditMeta(CamelModel):
    category: str
    name: str
    description: str
    help_text: str
    optimal_value: str
    scoring_mode: Literal["numeric", "binary"]
    required_artifacts: list[str]


class ExtendedInfo(MatchResult):
    timestamp: float
    time_in_ms: float


class AuditResult(CamelModel):
    score: int
    raw_value: float
    display_value: str
    optimal_value: str
    extended_info: ExtendedInfo
