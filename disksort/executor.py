"""Sort executor with event hooks.

Runs one SortRequest: builds the input row, looks the sorter up in the
registry, runs it with the logger context set, and returns a SortReport.
"""
import time
import traceback
from typing import Callable, List, Optional

from disksort.algorithm_api import get_sorters, logger as sort_logger
from disksort.disks import DiskRow
from disksort.models import (
    AlgorithmUnavailableError,
    SortReport,
    SortRequest,
    optimal_swap_count,
)


class SortExecutor:
    """Executes a sort request with log capture and event streaming."""

    def __init__(
        self,
        request: SortRequest,
        event_handler: Optional[Callable] = None,
    ):
        self.request = request
        self.event_handler = event_handler
        self.sorters = get_sorters()
        self._log_entries: List[dict] = []

    @property
    def log_entries(self) -> List[dict]:
        return list(self._log_entries)

    def _emit(self, event_type: str, **data):
        """Emit an event to the registered handler, if any."""
        if self.event_handler:
            self.event_handler(event_type, data)

    def _log_handler(self, level: str, algorithm: str, message: str):
        """Captures logs from sorters via the logger singleton."""
        entry = {
            "level": level,
            "algorithm": algorithm,
            "message": message,
            "timestamp": time.time(),
        }
        self._log_entries.append(entry)
        self._emit("log", **entry)
        if level != "DEBUG":
            print(f"  [{level}] [{algorithm}] {message}")

    def build_row(self) -> DiskRow:
        """The row the request asks to sort."""
        if self.request.initial is not None:
            return DiskRow.from_string(self.request.initial)
        return DiskRow(self.request.light_count)

    def execute(self) -> SortReport:
        """Run the request. Returns the report, re-raises lookup and sorter errors."""
        name = self.request.algorithm
        self._emit("start", algorithm=name, light_count=self.request.light_count,
                   initial=self.request.initial)

        start_time = time.time()
        sort_logger._set_context(name, self._log_handler)
        try:
            if name not in self.sorters:
                raise AlgorithmUnavailableError(name, "not registered")
            before = self.build_row()
            result = self.sorters[name](before)
        except Exception as exc:
            duration = (time.time() - start_time) * 1000
            self._emit("error", algorithm=name, error=str(exc),
                       stack_trace=traceback.format_exc(), duration_ms=duration)
            print(f"  ERROR: {exc}")
            raise
        finally:
            sort_logger._clear_context()
        duration = (time.time() - start_time) * 1000

        expected = optimal_swap_count(before.light_count())
        report = SortReport(
            algorithm=name,
            light_count=before.light_count(),
            before=before.to_string(),
            after=result.after().to_string(),
            swap_count=result.swap_count(),
            expected_swaps=expected,
            optimal=result.swap_count() == expected,
            duration_ms=round(duration, 3),
        )
        self._emit("complete", report=report.model_dump())
        return report
