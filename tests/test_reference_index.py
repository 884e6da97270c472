# tests/test_reference_index.py

from __future__ import annotations

import pytest

from tasklift.convert.index import ReferenceIndex
from tasklift.source.models import ListRecord, NoteRecord, SourceExport, SubtaskRecord, TaskRecord


def test_children_grouped_in_source_order(wunderlist_export: SourceExport) -> None:
    index = ReferenceIndex.build(wunderlist_export)

    assert [t.id for t in index.tasks_for(3)] == [5, 6, 7, 8]
    assert [s.title for s in index.subtasks_for(2)] == ["LoremSub1", "LoremSub2"]
    assert [f.file_name for f in index.files_for(3)] == ["file2.md"]
    assert [r.id for r in index.reminders_for(4)] == [2]


def test_known_parents_without_children_have_empty_entries(wunderlist_export: SourceExport) -> None:
    index = ReferenceIndex.build(wunderlist_export)

    # list 5 has no tasks, task 10 has nothing attached
    assert 5 in index.tasks_by_list
    assert index.tasks_by_list[5] == ()
    for mapping in (index.notes_by_task, index.files_by_task, index.reminders_by_task, index.subtasks_by_task):
        assert mapping[10] == ()

    # unknown ids are just empty, never KeyError
    assert index.notes_for(999) == ()


def test_no_record_is_dropped(wunderlist_export: SourceExport) -> None:
    index = ReferenceIndex.build(wunderlist_export)

    assert sum(len(v) for v in index.tasks_by_list.values()) == len(wunderlist_export.tasks)
    assert sum(len(v) for v in index.notes_by_task.values()) == len(wunderlist_export.notes)
    assert sum(len(v) for v in index.files_by_task.values()) == len(wunderlist_export.files)
    assert sum(len(v) for v in index.reminders_by_task.values()) == len(wunderlist_export.reminders)
    assert sum(len(v) for v in index.subtasks_by_task.values()) == len(wunderlist_export.subtasks)


def test_index_is_read_only(wunderlist_export: SourceExport) -> None:
    index = ReferenceIndex.build(wunderlist_export)

    with pytest.raises(TypeError):
        index.tasks_by_list[42] = ()  # type: ignore[index]


def test_dangling_references_reported() -> None:
    export = SourceExport(
        lists=(ListRecord(id=1, title="a"),),
        tasks=(TaskRecord(id=1, list_id=1, title="ok"), TaskRecord(id=2, list_id=77, title="lost")),
        notes=(NoteRecord(id=9, task_id=500, content="x"),),
        subtasks=(SubtaskRecord(id=3, task_id=1, title="fine"),),
    )
    index = ReferenceIndex.build(export)

    dangling = index.dangling_references()
    assert [(e.kind, e.ref_id) for e in dangling] == [("list", 77), ("task", 500)]
    assert "task id=2" in str(dangling[0])


def test_clean_export_has_no_dangling_references(wunderlist_export: SourceExport) -> None:
    assert ReferenceIndex.build(wunderlist_export).dangling_references() == []
