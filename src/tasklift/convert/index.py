# src/tasklift/convert/index.py

"""
Reference index: turns id-based foreign keys into parent -> children lookups.

Built once per build and read-only afterwards; conversion branches share it
without locking.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeVar

from ..core.errors import MissingReferenceError
from ..source.models import (
    FileRecord,
    ListRecord,
    NoteRecord,
    ReminderRecord,
    SourceExport,
    SubtaskRecord,
    TaskRecord,
)

R = TypeVar("R")


def _group_by(
    records: Iterable[R],
    key: Callable[[R], int],
    parents: Iterable[int],
) -> Mapping[int, tuple[R, ...]]:
    # Seed every known parent so "no children" is an empty tuple, not a missing key.
    grouped: dict[int, list[R]] = {pid: [] for pid in parents}
    for rec in records:
        grouped.setdefault(key(rec), []).append(rec)
    return MappingProxyType({pid: tuple(children) for pid, children in grouped.items()})


@dataclass(frozen=True, slots=True)
class ReferenceIndex:
    lists_by_id: Mapping[int, ListRecord]
    tasks_by_list: Mapping[int, tuple[TaskRecord, ...]]
    notes_by_task: Mapping[int, tuple[NoteRecord, ...]]
    files_by_task: Mapping[int, tuple[FileRecord, ...]]
    reminders_by_task: Mapping[int, tuple[ReminderRecord, ...]]
    subtasks_by_task: Mapping[int, tuple[SubtaskRecord, ...]]
    task_ids: frozenset[int]

    @classmethod
    def build(cls, export: SourceExport) -> ReferenceIndex:
        lists_by_id: dict[int, ListRecord] = {}
        for lst in export.lists:
            # first occurrence wins; duplicate ids in an export are undefined
            lists_by_id.setdefault(lst.id, lst)
        task_ids = [t.id for t in export.tasks]

        return cls(
            lists_by_id=MappingProxyType(lists_by_id),
            tasks_by_list=_group_by(export.tasks, lambda t: t.list_id, lists_by_id),
            notes_by_task=_group_by(export.notes, lambda n: n.task_id, task_ids),
            files_by_task=_group_by(export.files, lambda f: f.task_id, task_ids),
            reminders_by_task=_group_by(export.reminders, lambda r: r.task_id, task_ids),
            subtasks_by_task=_group_by(export.subtasks, lambda s: s.task_id, task_ids),
            task_ids=frozenset(task_ids),
        )

    def list_record(self, list_id: int) -> ListRecord | None:
        return self.lists_by_id.get(list_id)

    def tasks_for(self, list_id: int) -> tuple[TaskRecord, ...]:
        return self.tasks_by_list.get(list_id, ())

    def notes_for(self, task_id: int) -> tuple[NoteRecord, ...]:
        return self.notes_by_task.get(task_id, ())

    def files_for(self, task_id: int) -> tuple[FileRecord, ...]:
        return self.files_by_task.get(task_id, ())

    def reminders_for(self, task_id: int) -> tuple[ReminderRecord, ...]:
        return self.reminders_by_task.get(task_id, ())

    def subtasks_for(self, task_id: int) -> tuple[SubtaskRecord, ...]:
        return self.subtasks_by_task.get(task_id, ())

    def dangling_references(self) -> list[MissingReferenceError]:
        """
        Child records whose parent id is unknown, in a stable order:
        tasks first, then notes, files, reminders, subtasks.

        Such records are indexed but unreachable from any list, so the builder
        would silently lose them.
        """
        out: list[MissingReferenceError] = []
        for list_id, tasks in self.tasks_by_list.items():
            if list_id in self.lists_by_id:
                continue
            out.extend(MissingReferenceError("list", list_id, f"task id={t.id}") for t in tasks)

        per_task: list[tuple[str, Mapping[int, tuple]]] = [
            ("note", self.notes_by_task),
            ("file", self.files_by_task),
            ("reminder", self.reminders_by_task),
            ("subtask", self.subtasks_by_task),
        ]
        for child_kind, mapping in per_task:
            for task_id, children in mapping.items():
                if task_id in self.task_ids:
                    continue
                out.extend(
                    MissingReferenceError("task", task_id, f"{child_kind} id={c.id}") for c in children
                )
        return out
