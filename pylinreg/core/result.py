"""
What a backend hands back.

A backend's solve() returns Result[P]: the numbers it computed (P, e.g.
LinearParams) plus how it got them. The user-facing solution classes
wrap a Result and never copy out of it.

    - info: method, rank, condition number, cutoff, dtype, device
    - timing: per-section seconds from Timer, or None
    - warnings: rank deficiency and similar non-fatal findings
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Frozen envelope around a backend's payload.

    Attributes:
        params: The payload (LinearParams for regression)
        info: Method and diagnostics, keys listed in the module docstring
        timing: Seconds per section plus 'total_seconds', or None
        backend_name: e.g. 'cpu_svd', 'gpu_svd_fp32'
        warnings: Non-fatal findings, in the order they were made
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
