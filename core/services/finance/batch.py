from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Iterable

from core.services.finance.models import MarginSummary, ProjectMargin
from core.services.finance.policy import resolve_margin_batch_size

logger = logging.getLogger(__name__)

MarginCalculator = Callable[[str], ProjectMargin]


class BatchMarginRunner:
    """
    Margin summaries for many projects, for list and portfolio views.

    Projects run in fixed-size groups: groups one after another, the projects
    of a group concurrently. A failing project is logged and reported as
    MarginSummary.unknown(); it never aborts its group or later groups.
    """

    def __init__(self, calculate: MarginCalculator, *, batch_size: int | None = None):
        if batch_size is not None and batch_size < 1:
            raise ValueError("Batch size must be a positive integer.")
        self._calculate: MarginCalculator = calculate
        self._batch_size: int | None = batch_size

    @property
    def batch_size(self) -> int:
        return self._batch_size or resolve_margin_batch_size()

    def run(self, project_ids: Iterable[str]) -> dict[str, MarginSummary]:
        ordered = list(dict.fromkeys(project_ids))
        size = self.batch_size
        results: dict[str, MarginSummary] = {}
        for start in range(0, len(ordered), size):
            results.update(self._run_group(ordered[start:start + size]))
        return results

    def _run_group(self, group: list[str]) -> dict[str, MarginSummary]:
        with ThreadPoolExecutor(max_workers=len(group), thread_name_prefix="margin-batch") as executor:
            futures = {project_id: executor.submit(self._calculate, project_id) for project_id in group}
            return {
                project_id: self._capture(project_id, future)
                for project_id, future in futures.items()
            }

    @staticmethod
    def _capture(project_id: str, future: Future) -> MarginSummary:
        try:
            return MarginSummary.from_margin(future.result())
        except Exception:
            logger.exception("Margin calculation failed for project %s", project_id)
            return MarginSummary.unknown()


__all__ = ["BatchMarginRunner", "MarginCalculator"]
