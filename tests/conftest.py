# tests/conftest.py

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from tasklift.config import Settings
from tasklift.source.models import (
    FileRecord,
    Folder,
    ListRecord,
    NoteRecord,
    ReminderRecord,
    SourceExport,
    SubtaskRecord,
    TaskRecord,
)

from .fakes import FakeFileServer

TIME1 = datetime(2013, 8, 30, 8, 29, 46, 203000, tzinfo=timezone.utc)
TIME2 = datetime(2013, 8, 30, 8, 36, 13, 273000, tzinfo=timezone.utc)
TIME3 = datetime(2013, 9, 5, 8, 36, 13, 273000, tzinfo=timezone.utc)
TIME4 = datetime(2013, 8, 2, 11, 58, 55, tzinfo=timezone.utc)

ATTACHMENT_URL = "https://files.example.test/testimage.jpg"
ATTACHMENT_BYTES = b"\xff\xd8\xff\xe0fake-jpeg-payload"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Explicit Settings rather than Settings.from_env(), so the developer's
    environment / .env never leaks into tests.
    """
    return Settings(
        app_name="tasklift-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        source_name="wunderlist",
        fallback_namespace_template="Migrated from {source}",
        strict_references=True,
        fetch_concurrency=2,
        fetch_timeout_seconds=5.0,
        user_agent="tasklift-test",
        max_attempts=1,
        retry_delay_seconds=0.0,
    )


@pytest.fixture()
def file_server() -> FakeFileServer:
    return FakeFileServer({ATTACHMENT_URL: ATTACHMENT_BYTES})


def _task(task_id: int, list_id: int, done: bool) -> TaskRecord:
    return TaskRecord(
        id=task_id,
        list_id=list_id,
        title=f"Ipsum{task_id}",
        created_at=TIME1,
        due_date="2013-09-05",
        completed=done,
        completed_at=TIME1 if done else datetime(1970, 1, 1, tzinfo=timezone.utc),
        assignee_id=123,
    )


def _note(note_id: int, task_id: int) -> NoteRecord:
    return NoteRecord(
        id=note_id,
        task_id=task_id,
        content="Lorem Ipsum dolor sit amet",
        created_at=TIME3,
        updated_at=TIME2,
    )


@pytest.fixture()
def wunderlist_export() -> SourceExport:
    """One folder with lists 1-4 and one list (5) that no folder owns."""
    return SourceExport(
        folders=(
            Folder(id=123, title="Lorem Ipsum", list_ids=(1, 2, 3, 4), created_at=TIME1, updated_at=TIME2),
        ),
        lists=(
            ListRecord(id=1, title="Lorem1", created_at=TIME1),
            ListRecord(id=2, title="Lorem2", created_at=TIME1),
            ListRecord(id=3, title="Lorem3", created_at=TIME1),
            ListRecord(id=4, title="Lorem4", created_at=TIME1),
            ListRecord(id=5, title="List without a namespace", created_at=TIME4),
        ),
        tasks=(
            _task(1, 1, False),
            _task(2, 1, False),
            _task(3, 2, True),
            _task(4, 2, False),
            _task(5, 3, False),
            _task(6, 3, True),
            _task(7, 3, True),
            _task(8, 3, False),
            _task(9, 4, True),
            _task(10, 4, True),
        ),
        notes=(_note(1, 1), _note(2, 2), _note(3, 3)),
        files=(
            FileRecord(
                id=1,
                url=ATTACHMENT_URL,
                task_id=1,
                list_id=1,
                file_name="file.md",
                content_type="text/plain",
                file_size=12345,
                created_at=TIME2,
                updated_at=TIME4,
            ),
            FileRecord(
                id=2,
                url=ATTACHMENT_URL,
                task_id=3,
                list_id=2,
                file_name="file2.md",
                content_type="text/plain",
                file_size=12345,
                created_at=TIME3,
                updated_at=TIME4,
            ),
        ),
        reminders=(
            ReminderRecord(id=1, date=TIME4, task_id=1, created_at=TIME4, updated_at=TIME4),
            ReminderRecord(id=2, date=TIME3, task_id=4, created_at=TIME3, updated_at=TIME3),
        ),
        subtasks=(
            SubtaskRecord(id=1, task_id=2, created_at=TIME4, title="LoremSub1"),
            SubtaskRecord(id=2, task_id=2, created_at=TIME4, title="LoremSub2"),
            SubtaskRecord(id=3, task_id=4, created_at=TIME4, title="LoremSub3"),
        ),
    )
