# src/tasklift/migration/runner.py

from __future__ import annotations

"""
Migration run supervisor.

A small loop around the hierarchy builder that:
- builds the hierarchy (all-or-nothing),
- retries the whole build when the failure was a download (the source is only
  read, so re-running is safe); bad data is never retried,
- hands the complete hierarchy to the persistence sink exactly once.

Storage details belong to the sink, not the runner.
"""

import asyncio
import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass

from ..core.errors import HierarchyBuildError
from ..core.ports import HierarchyBuilderPort, HierarchySink
from ..hierarchy.models import NamespaceGroup
from ..source.models import SourceExport

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class MigrationReport:
    source_name: str
    namespaces: int
    lists: int
    tasks: int
    attachments: int
    attempts: int
    duration_seconds: float


def summarize(groups: Iterable[NamespaceGroup]) -> tuple[int, int, int, int]:
    """(namespaces, lists, tasks, attachments) of a converted hierarchy."""
    namespaces = lists = tasks = attachments = 0
    for ns in groups:
        namespaces += 1
        for lst in ns.lists:
            lists += 1
            for task in lst.tasks:
                tasks += 1
                attachments += len(task.attachments)
    return namespaces, lists, tasks, attachments


async def run_migration(
        export: SourceExport,
        *,
        builder: HierarchyBuilderPort,
        sink: HierarchySink,
        source_name: str = "",
        max_attempts: int = 1,
        retry_delay_seconds: float = 0.0,
) -> MigrationReport:
    """
    Build + save with a retry policy for transient download failures.

    Raises the last HierarchyBuildError once attempts are exhausted or the failure
    is not retryable. Sink errors propagate unchanged and are not retried.
    """
    attempts_allowed = max(1, int(max_attempts))
    delay_s = max(0.0, float(retry_delay_seconds))
    t0 = time.monotonic()

    attempt = 0
    while True:
        attempt += 1
        logger.info("Migration %s: attempt %d/%d", source_name or "run", attempt, attempts_allowed)
        try:
            groups = await builder.build(export)
            break
        except HierarchyBuildError as e:
            if not e.retryable or attempt >= attempts_allowed:
                logger.error("Migration %s failed after %d attempt(s): %s", source_name or "run", attempt, e)
                raise
            logger.warning("Migration attempt %d failed (%s); retrying in %.1fs", attempt, e.cause, delay_s)
            await asyncio.sleep(delay_s)

    await sink.save(groups)

    namespaces, lists, tasks, attachments = summarize(groups)
    report = MigrationReport(
        source_name=source_name,
        namespaces=namespaces,
        lists=lists,
        tasks=tasks,
        attachments=attachments,
        attempts=attempt,
        duration_seconds=time.monotonic() - t0,
    )
    logger.info(
        "Migration %s done: namespaces=%d lists=%d tasks=%d attachments=%d attempts=%d",
        source_name or "run",
        namespaces,
        lists,
        tasks,
        attachments,
        attempt,
    )
    return report
