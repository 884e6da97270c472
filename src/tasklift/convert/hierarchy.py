# src/tasklift/convert/hierarchy.py

from __future__ import annotations

"""
Hierarchy builder.

Walks folders in source order and assembles namespace -> list -> task trees.
Lists that no folder claims are collected, in source order, into one synthetic
fallback namespace appended last (and only when it is not empty).

The tree is laid out synchronously first; then every task conversion in the
export runs concurrently and writes into its pre-allocated slot. Output order
therefore depends on source order only.

All-or-nothing: any failure (bad timestamp, failed download, dangling reference
in strict mode) surfaces as one HierarchyBuildError and no hierarchy is returned.
"""

import logging
from dataclasses import dataclass

from ..config import Settings
from ..core.errors import HierarchyBuildError, MigrationError, MissingReferenceError
from ..core.ports import AttachmentSource
from ..hierarchy.models import ListGroup, NamespaceGroup
from ..source.models import ListRecord, SourceExport, TaskRecord
from .index import ReferenceIndex
from .ordered import OrderedGatherError, gather_ordered
from .task_converter import convert_task
from .timestamps import to_epoch

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Layout:
    """Namespaces with empty task lists, plus what has to be converted into them."""

    groups: list[NamespaceGroup]
    jobs: list[tuple[ListGroup, TaskRecord]]


def _check_references(index: ReferenceIndex, export: SourceExport, *, strict: bool) -> None:
    dangling: list[MissingReferenceError] = []
    for folder in export.folders:
        for list_id in folder.list_ids:
            if index.list_record(list_id) is None:
                dangling.append(MissingReferenceError("list", list_id, f"folder id={folder.id}"))
    dangling.extend(index.dangling_references())

    if not dangling:
        return
    if strict:
        raise dangling[0]
    for err in dangling:
        logger.warning("Skipping dangling reference: %s", err)


def _list_group(lst: ListRecord, index: ReferenceIndex, jobs: list[tuple[ListGroup, TaskRecord]]) -> ListGroup:
    group = ListGroup(title=lst.title, created=to_epoch(lst.created_at))
    jobs.extend((group, task) for task in index.tasks_for(lst.id))
    return group


def _layout(export: SourceExport, index: ReferenceIndex, fallback_namespace_name: str) -> _Layout:
    groups: list[NamespaceGroup] = []
    jobs: list[tuple[ListGroup, TaskRecord]] = []
    claimed: set[int] = set()

    for folder in export.folders:
        namespace = NamespaceGroup(
            name=folder.title,
            created=to_epoch(folder.created_at),
            updated=to_epoch(folder.updated_at),
        )
        for list_id in folder.list_ids:
            lst = index.list_record(list_id)
            if lst is None:
                # only reachable in lenient mode, already logged
                continue
            claimed.add(list_id)
            namespace.lists.append(_list_group(lst, index, jobs))
        # a folder whose lists are all gone still shows up
        groups.append(namespace)

    fallback = NamespaceGroup(name=fallback_namespace_name)
    for lst in export.lists:
        if lst.id in claimed:
            continue
        fallback.lists.append(_list_group(lst, index, jobs))
    if fallback.lists:
        groups.append(fallback)

    return _Layout(groups=groups, jobs=jobs)


async def build_hierarchy(
    export: SourceExport,
    attachments: AttachmentSource,
    *,
    fallback_namespace_name: str,
    strict_references: bool = True,
) -> list[NamespaceGroup]:
    """
    Convert a whole export into ordered NamespaceGroups.

    Raises HierarchyBuildError; its cause is the first failure in source order.
    Cancelling the caller cancels in-flight downloads and propagates CancelledError.
    """
    try:
        index = ReferenceIndex.build(export)
        _check_references(index, export, strict=strict_references)
        layout = _layout(export, index, fallback_namespace_name)
    except MigrationError as e:
        logger.error("Hierarchy build failed before conversion: %s", e)
        raise HierarchyBuildError(e) from e

    logger.info(
        "Converting %d task(s) into %d namespace(s)",
        len(layout.jobs),
        len(layout.groups),
    )

    try:
        converted = await gather_ordered([convert_task(task, index, attachments) for _, task in layout.jobs])
    except OrderedGatherError as e:
        logger.error("Hierarchy build failed: %s (%d failure(s))", e.first, len(e.failures))
        raise HierarchyBuildError(e.first, e.errors) from e.first

    # jobs are in source order per list, so appending keeps task order
    for (group, _), task in zip(layout.jobs, converted):
        group.tasks.append(task)

    return layout.groups


class HierarchyBuilder:
    """build_hierarchy() bound to a resolver and the settings-derived options."""

    def __init__(
        self,
        attachments: AttachmentSource,
        *,
        fallback_namespace_name: str,
        strict_references: bool = True,
    ) -> None:
        self.attachments = attachments
        self.fallback_namespace_name = fallback_namespace_name
        self.strict_references = strict_references

    @classmethod
    def from_settings(cls, attachments: AttachmentSource, settings: Settings) -> HierarchyBuilder:
        return cls(
            attachments,
            fallback_namespace_name=settings.fallback_namespace_name,
            strict_references=settings.strict_references,
        )

    async def build(self, export: SourceExport) -> list[NamespaceGroup]:
        return await build_hierarchy(
            export,
            self.attachments,
            fallback_namespace_name=self.fallback_namespace_name,
            strict_references=self.strict_references,
        )
