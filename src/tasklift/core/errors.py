# src/tasklift/core/errors.py

"""
Error kinds raised by the conversion pipeline.

Nothing inside the pipeline swallows these: every component raises to its caller,
and the hierarchy builder folds whatever happened into one HierarchyBuildError.
"""

from __future__ import annotations

from collections.abc import Sequence


class MigrationError(Exception):
    """Base class for every failure of a migration run."""


class TimestampFormatError(MigrationError, ValueError):
    """A date/time value in the export could not be parsed. Not retryable."""

    def __init__(self, value: object, reason: str = "") -> None:
        self.value = value
        self.reason = reason
        msg = f"malformed timestamp {value!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class AttachmentFetchError(MigrationError):
    """Downloading an attachment payload failed. Retryable by re-running the migration."""

    def __init__(self, url: str, cause: BaseException, *, status_code: int | None = None) -> None:
        self.url = url
        self.cause = cause
        self.status_code = status_code
        detail = f"HTTP {status_code}" if status_code is not None else (str(cause) or type(cause).__name__)
        super().__init__(f"failed to fetch attachment {url}: {detail}")


class MissingReferenceError(MigrationError, LookupError):
    """A record points at an id that does not exist in the export."""

    def __init__(self, kind: str, ref_id: int, referenced_by: str) -> None:
        self.kind = kind
        self.ref_id = ref_id
        self.referenced_by = referenced_by
        super().__init__(f"{referenced_by} references unknown {kind} id={ref_id}")


class HierarchyBuildError(MigrationError):
    """
    The single error a failed build surfaces.

    cause is the first failure (source order); errors holds every failure collected
    before the remaining work was cancelled.
    """

    def __init__(self, cause: BaseException, errors: Sequence[BaseException] = ()) -> None:
        self.cause = cause
        self.errors: tuple[BaseException, ...] = tuple(errors) or (cause,)
        extra = len(self.errors) - 1
        suffix = f" (+{extra} more)" if extra > 0 else ""
        super().__init__(f"hierarchy build failed: {cause}{suffix}")

    @property
    def retryable(self) -> bool:
        return isinstance(self.cause, AttachmentFetchError)
