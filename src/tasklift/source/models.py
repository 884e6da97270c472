# src/tasklift/source/models.py

"""
Records of a source export, as handed over by the extraction step.

Relationships are bare numeric ids (task.list_id, note.task_id, ...); the
convert package turns them into an owned tree. Timestamps are datetimes (naive
means UTC), ISO-8601 strings, or None for "never happened".
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

Timestamp = datetime | str | None


@dataclass(frozen=True, slots=True)
class Folder:
    id: int
    title: str
    list_ids: tuple[int, ...] = ()
    created_at: Timestamp = None
    updated_at: Timestamp = None


@dataclass(frozen=True, slots=True)
class ListRecord:
    id: int
    title: str
    created_at: Timestamp = None


@dataclass(frozen=True, slots=True)
class TaskRecord:
    id: int
    list_id: int
    title: str
    created_at: Timestamp = None
    due_date: str | None = None  # "YYYY-MM-DD", no time of day
    completed: bool = False
    completed_at: Timestamp = None  # only meaningful when completed
    assignee_id: int | None = None


@dataclass(frozen=True, slots=True)
class NoteRecord:
    id: int
    task_id: int
    content: str
    created_at: Timestamp = None
    updated_at: Timestamp = None


@dataclass(frozen=True, slots=True)
class FileRecord:
    id: int
    task_id: int
    list_id: int
    url: str
    file_name: str
    content_type: str = "application/octet-stream"
    file_size: int = 0
    created_at: Timestamp = None
    updated_at: Timestamp = None


@dataclass(frozen=True, slots=True)
class ReminderRecord:
    id: int
    task_id: int
    date: Timestamp
    created_at: Timestamp = None
    updated_at: Timestamp = None


@dataclass(frozen=True, slots=True)
class SubtaskRecord:
    id: int
    task_id: int
    title: str
    created_at: Timestamp = None


@dataclass(frozen=True, slots=True)
class SourceExport:
    """The whole export. Every sequence is in source iteration order."""

    folders: tuple[Folder, ...] = ()
    lists: tuple[ListRecord, ...] = ()
    tasks: tuple[TaskRecord, ...] = ()
    notes: tuple[NoteRecord, ...] = ()
    files: tuple[FileRecord, ...] = ()
    reminders: tuple[ReminderRecord, ...] = ()
    subtasks: tuple[SubtaskRecord, ...] = ()
