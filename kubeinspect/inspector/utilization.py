"""Resource utilization calculation for container usage bars.

Usage is measured against the container's request, falling back to its limit
when no request is set. Without either the bar is omitted entirely.
"""

from __future__ import annotations

from dataclasses import dataclass

from kubeinspect.constants import (
    UTILIZATION_ERROR_THRESHOLD_DEFAULT,
    UTILIZATION_WARNING_THRESHOLD_DEFAULT,
    Severity,
)


@dataclass(frozen=True)
class UtilizationSample:
    """Utilization of one resource against its request or limit.

    Attributes:
        percent: True, unclamped percentage of the reference quantity.
        fill_fraction: Visual fill of the bar, clamped to [0, 1].
        show_bar: Whether a bar should be displayed at all.
        warning_threshold: Bar offset (fraction) where the warning band starts.
        error_threshold: Bar offset (fraction) where the error band starts.
    """

    percent: float
    fill_fraction: float
    show_bar: bool
    warning_threshold: float = UTILIZATION_WARNING_THRESHOLD_DEFAULT
    error_threshold: float = UTILIZATION_ERROR_THRESHOLD_DEFAULT

    @property
    def severity(self) -> Severity | None:
        """Band the unclamped percentage falls in, or None without a bar."""
        if not self.show_bar:
            return None
        ratio = self.percent / 100
        if ratio >= self.error_threshold:
            return Severity.ERROR
        if ratio >= self.warning_threshold:
            return Severity.WARNING
        return Severity.INFO

    def tooltip(self, label: str) -> str:
        """Tooltip text, e.g. ``"117% Memory"``."""
        return f"{self.percent:.0f}% {label}"


HIDDEN_SAMPLE = UtilizationSample(percent=0.0, fill_fraction=0.0, show_bar=False)


def utilization(
    actual: float,
    requested: float | None,
    limit: float | None,
    *,
    warning_threshold: float = UTILIZATION_WARNING_THRESHOLD_DEFAULT,
    error_threshold: float = UTILIZATION_ERROR_THRESHOLD_DEFAULT,
) -> UtilizationSample:
    """Compute the utilization of ``actual`` against a request or limit.

    Args:
        actual: Measured usage in base units.
        requested: Requested quantity, or None when unset.
        limit: Limit quantity, or None when unset.
        warning_threshold: Fraction where the warning band starts.
        error_threshold: Fraction where the error band starts.

    Returns:
        The utilization sample. ``show_bar`` is False when neither a non-zero
        request nor a non-zero limit is available.
    """
    reference = requested if requested else limit
    if not reference:
        return HIDDEN_SAMPLE

    percent = actual / reference * 100
    return UtilizationSample(
        percent=percent,
        fill_fraction=max(0.0, min(percent / 100, 1.0)),
        show_bar=True,
        warning_threshold=warning_threshold,
        error_threshold=error_threshold,
    )


__all__ = [
    "HIDDEN_SAMPLE",
    "UtilizationSample",
    "utilization",
]
