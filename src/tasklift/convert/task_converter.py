# src/tasklift/convert/task_converter.py

from __future__ import annotations

import logging

from ..core.ports import AttachmentSource
from ..hierarchy.models import RelatedTask, RelationKind, TaskOut
from ..source.models import TaskRecord
from .index import ReferenceIndex
from .timestamps import to_epoch, to_epoch_from_date_only

logger = logging.getLogger(__name__)


async def convert_task(
    record: TaskRecord,
    index: ReferenceIndex,
    attachments: AttachmentSource,
) -> TaskOut:
    """
    Convert one source task plus its indexed children into a TaskOut.

    - done_at is only taken from the source when the task is completed;
      a completed_at on an open task never reaches the output.
    - The first note (source order) is the description. Later notes are
      dropped on purpose: the target has a single description field.
    - Subtasks become title-only relation stubs; no SUBTASK key without subtasks.
    - Attachment downloads happen last, after all timestamp parsing, and any
      failure fails the whole task.
    """
    task = TaskOut(
        text=record.title,
        done=bool(record.completed),
        due_date=to_epoch_from_date_only(record.due_date),
        created=to_epoch(record.created_at),
    )
    if task.done:
        task.done_at = to_epoch(record.completed_at)

    notes = index.notes_for(record.id)
    if notes:
        task.description = notes[0].content

    task.reminders = [to_epoch(r.date) for r in index.reminders_for(record.id)]

    subtasks = index.subtasks_for(record.id)
    if subtasks:
        task.related_tasks[RelationKind.SUBTASK] = [RelatedTask(text=s.title) for s in subtasks]

    files = index.files_for(record.id)
    if files:
        task.attachments = await attachments.resolve_all(files)
        logger.debug("Task id=%s: %d attachment(s) resolved", record.id, len(task.attachments))

    return task
