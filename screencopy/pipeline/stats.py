import math
from collections.abc import Iterable
from dataclasses import dataclass

from screencopy.screens.models import ScreenRecord, ScreenStatus


@dataclass(frozen=True)
class BatchStats:
    """Read-only progress figures derived from the store and the run state.

    Errors stay hidden while a run is in flight: a failed screen counts
    toward percent but not toward error until the run settles.
    """

    success: int = 0
    error: int = 0
    total: int = 0
    percent: int = 0
    success_percent: float = 0.0
    error_percent: float = 0.0
    is_finished: bool = False
    has_errors: bool = False


def compute_stats(records: Iterable[ScreenRecord], is_running: bool) -> BatchStats:
    records = list(records)
    total = len(records)
    if total == 0:
        return BatchStats()

    success = sum(1 for r in records if r.status is ScreenStatus.COMPLETED)
    errors = sum(1 for r in records if r.status is ScreenStatus.ERROR)
    settled = sum(1 for r in records if r.is_settled)
    visible_errors = 0 if is_running else errors

    return BatchStats(
        success=success,
        error=visible_errors,
        total=total,
        percent=math.floor(settled / total * 100 + 0.5),
        success_percent=success / total * 100,
        error_percent=visible_errors / total * 100,
        is_finished=settled == total and not is_running,
        has_errors=not is_running and errors > 0,
    )


def display_status(record: ScreenRecord, is_running: bool) -> ScreenStatus:
    """Status as observers should show it: failures read as processing mid-run."""
    if is_running and record.status is ScreenStatus.ERROR:
        return ScreenStatus.PROCESSING
    return record.status
