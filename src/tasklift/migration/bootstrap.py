# src/tasklift/migration/bootstrap.py

"""
Composition root for a migration run.

- takes settings once (injectable, falls back to get_settings()),
- wires the httpx-backed attachment resolver into the hierarchy builder,
- runs the supervisor with the configured retry policy.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..convert.attachments import AttachmentResolver
from ..convert.hierarchy import HierarchyBuilder
from ..core.ports import HierarchySink
from ..source.models import SourceExport
from .runner import MigrationReport, run_migration

logger = logging.getLogger(__name__)


async def migrate(
    export: SourceExport,
    sink: HierarchySink,
    *,
    settings: Settings | None = None,
) -> MigrationReport:
    if settings is None:
        settings = get_settings()

    logger.info(
        "Starting %s migration from %s (fetch_concurrency=%d, strict_references=%s)",
        settings.app_name,
        settings.source_name,
        settings.fetch_concurrency,
        settings.strict_references,
    )

    async with AttachmentResolver.from_settings(settings) as resolver:
        builder = HierarchyBuilder.from_settings(resolver, settings)
        return await run_migration(
            export,
            builder=builder,
            sink=sink,
            source_name=settings.source_name,
            max_attempts=settings.max_attempts,
            retry_delay_seconds=settings.retry_delay_seconds,
        )
