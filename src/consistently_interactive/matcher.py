"""Quiet-window matching — earliest CPU/network pair that is mutually quiet long enough.

Both candidate lists are filtered to windows that are long enough and end
late enough after first meaningful paint, then walked with two cursors:

- CPU starts no earlier than network: the network window must cover
  ``[cpu.start, cpu.start + required]``, else the network cursor advances.
- Network starts later: the CPU window must cover
  ``[network.start, network.start + required]``, else the CPU cursor advances.

A discarded window can never pair with a later candidate from the other
list, because those only start later. When one list runs out the other
domain's last open candidate decides the culprit.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from consistently_interactive.config import QuietWindowThresholds
from consistently_interactive.models import MatchResult, QuietPeriod, QuietWindowNotFound

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def filter_quiet_periods(
    periods: Iterable[QuietPeriod],
    first_meaningful_paint: float,
    required_quiet_window_ms: float,
) -> list[QuietPeriod]:
    """Drop windows that are too short or end too soon after first meaningful paint."""
    return [
        p
        for p in periods
        if p.end > first_meaningful_paint + required_quiet_window_ms
        and p.duration >= required_quiet_window_ms
    ]


def find_overlapping_quiet_periods(
    cpu_periods: Iterable[QuietPeriod],
    network_periods: Iterable[QuietPeriod],
    first_meaningful_paint: float,
    thresholds: QuietWindowThresholds | None = None,
) -> MatchResult | QuietWindowNotFound:
    """Find the first CPU/network pair that stays quiet together for the required window.

    Args:
        cpu_periods: CPU quiet periods, ascending by start.
        network_periods: Network quiet periods, ascending by start.
        first_meaningful_paint: FMP timestamp on the absolute timeline (ms).
        thresholds: Supplies the required quiet window (default 5000ms).

    Returns:
        MatchResult with the matched pair and both filtered lists, or
        QuietWindowNotFound naming the domain that never quieted.
    """
    if thresholds is None:
        thresholds = QuietWindowThresholds()
    required = thresholds.required_quiet_window_ms

    cpu_quiet_periods = filter_quiet_periods(cpu_periods, first_meaningful_paint, required)
    network_quiet_periods = filter_quiet_periods(network_periods, first_meaningful_paint, required)
    logger.debug(
        "Matching %d CPU and %d network candidates",
        len(cpu_quiet_periods),
        len(network_quiet_periods),
    )

    cpu_index = 0
    network_index = 0
    while cpu_index < len(cpu_quiet_periods) and network_index < len(network_quiet_periods):
        cpu_candidate = cpu_quiet_periods[cpu_index]
        network_candidate = network_quiet_periods[network_index]

        if cpu_candidate.start >= network_candidate.start:
            # CPU starts later; network must contain the required window from there
            if network_candidate.end >= cpu_candidate.start + required:
                break
            network_index += 1
        else:
            # Network starts later; CPU must contain the required window from there
            if cpu_candidate.end >= network_candidate.start + required:
                break
            cpu_index += 1
    else:
        culprit = "Network" if cpu_index < len(cpu_quiet_periods) else "CPU"
        logger.debug("No mutual quiet window; %s never quieted", culprit)
        return QuietWindowNotFound(
            culprit=culprit,
            required_quiet_window_ms=required,
            cpu_quiet_periods=cpu_quiet_periods,
            network_quiet_periods=network_quiet_periods,
        )

    logger.debug(
        "Matched CPU window %.0f-%.0f with network window %.0f-%.0f",
        cpu_candidate.start,
        cpu_candidate.end,
        network_candidate.start,
        network_candidate.end,
    )
    return MatchResult(
        cpu_quiet_period=cpu_candidate,
        network_quiet_period=network_candidate,
        cpu_quiet_periods=cpu_quiet_periods,
        network_quiet_periods=network_quiet_periods,
    )
