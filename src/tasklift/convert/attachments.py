# src/tasklift/convert/attachments.py

from __future__ import annotations

"""
Attachment resolver.

Downloads the payload behind a file record and assembles a self-contained
TaskAttachment. One failed download fails with AttachmentFetchError for that
file; nothing is retried here (re-running the migration is the retry).

Concurrency: every fetch goes through one semaphore, so a resolver shared by all
task conversions of a build is a bounded worker pool. resolve_all() keeps the
input order regardless of which download finishes first.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager

import httpx

from ..config import Settings
from ..core.errors import AttachmentFetchError
from ..hierarchy.models import AttachmentFile, TaskAttachment
from ..source.models import FileRecord
from .ordered import OrderedGatherError, gather_ordered
from .timestamps import to_datetime, to_epoch

logger = logging.getLogger(__name__)


class AttachmentResolver:
    def __init__(self, client: httpx.AsyncClient, *, concurrency: int = 4) -> None:
        self._client = client
        self._semaphore = asyncio.Semaphore(max(1, int(concurrency)))

    @classmethod
    @asynccontextmanager
    async def from_settings(cls, settings: Settings) -> AsyncIterator[AttachmentResolver]:
        """
        Resolver owning its own httpx client, closed on exit.

        Redirects are left at the httpx default (not followed); pass your own
        client to the constructor to change transport policy.
        """
        timeout = httpx.Timeout(settings.fetch_timeout_seconds)
        headers = {"User-Agent": settings.user_agent}
        async with httpx.AsyncClient(timeout=timeout, headers=headers) as client:
            yield cls(client, concurrency=settings.fetch_concurrency)

    async def _download(self, url: str) -> bytes:
        async with self._semaphore:
            try:
                response = await self._client.get(url)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.warning("Attachment fetch failed url=%s error=%s", url, e.__class__.__name__)
                raise AttachmentFetchError(url, e) from e

            if not response.is_success:
                logger.warning("Attachment fetch failed url=%s status=%s", url, response.status_code)
                cause = httpx.HTTPStatusError(
                    f"unexpected status {response.status_code}",
                    request=response.request,
                    response=response,
                )
                raise AttachmentFetchError(url, cause, status_code=response.status_code) from cause

            content = response.content
            logger.debug("Fetched attachment url=%s bytes=%d", url, len(content))
            return content

    async def resolve(self, record: FileRecord) -> TaskAttachment:
        # Timestamps first: malformed data should fail before any request goes out.
        created_unix = to_epoch(record.created_at)
        created = to_datetime(record.created_at)

        content = await self._download(record.url)

        return TaskAttachment(
            file=AttachmentFile(
                name=record.file_name,
                mime=record.content_type,
                size=record.file_size,
                created=created,
                created_unix=created_unix,
                content=content,
            ),
            created=created_unix,
        )

    async def resolve_all(self, records: Sequence[FileRecord]) -> list[TaskAttachment]:
        """Resolve every record; result i belongs to records[i]. First failure wins."""
        if not records:
            return []
        if len(records) == 1:
            return [await self.resolve(records[0])]

        try:
            return await gather_ordered([self.resolve(rec) for rec in records])
        except OrderedGatherError as e:
            raise e.first
