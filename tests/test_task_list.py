"""
Tests for the pure task list operations.
"""

import json

import pytest

from app.domain.models import Task
from app.domain.task_list import (
    InvalidTaskListError,
    add_task,
    delete_task,
    dump_tasks,
    load_tasks,
    new_task_id,
    parse_task_records,
    toggle_task,
)


@pytest.fixture
def three_tasks():
    return [
        Task(id="a", title="Buy milk"),
        Task(id="b", title="Walk dog", completed=True),
        Task(id="c", title="Call mom"),
    ]


class TestAdd:

    @pytest.mark.parametrize("title", ["Buy milk", "  Buy milk  ", "\tx\n"])
    def test_non_blank_title_appends_open_task(self, three_tasks, sequential_ids, title):
        result = add_task(three_tasks, title, sequential_ids)

        assert len(result) == len(three_tasks) + 1
        assert result[:-1] == three_tasks
        new_task = result[-1]
        assert new_task.title == title.strip()
        assert new_task.completed is False
        assert new_task.id == "1"

    @pytest.mark.parametrize("title", ["", "   ", "\t\n "])
    def test_blank_title_is_silently_ignored(self, three_tasks, title):
        result = add_task(three_tasks, title)

        assert result is three_tasks
        assert [t.id for t in result] == ["a", "b", "c"]

    def test_does_not_mutate_input(self, three_tasks):
        before = list(three_tasks)
        add_task(three_tasks, "New")
        assert three_tasks == before

    def test_default_ids_are_unique(self):
        tasks = []
        for i in range(200):
            tasks = add_task(tasks, f"task {i}")
        assert len({t.id for t in tasks}) == 200

    def test_new_task_id_is_hex_string(self):
        task_id = new_task_id()
        assert isinstance(task_id, str)
        int(task_id, 16)


class TestToggle:

    def test_flips_only_matching_task(self, three_tasks):
        result = toggle_task(three_tasks, "b")

        assert result is not three_tasks
        assert result[1].completed is False
        assert result[1].id == "b"
        assert result[1].title == "Walk dog"
        assert result[0] is three_tasks[0]
        assert result[2] is three_tasks[2]
        # input untouched
        assert three_tasks[1].completed is True

    def test_toggle_twice_restores(self, three_tasks):
        assert toggle_task(toggle_task(three_tasks, "a"), "a") == three_tasks

    def test_unknown_id_is_noop(self, three_tasks):
        assert toggle_task(three_tasks, "zzz") is three_tasks


class TestDelete:

    def test_removes_matching_task(self, three_tasks):
        result = delete_task(three_tasks, "b")
        assert [t.id for t in result] == ["a", "c"]
        assert len(three_tasks) == 3

    def test_unknown_id_is_noop(self, three_tasks):
        assert delete_task(three_tasks, "zzz") is three_tasks

    def test_delete_from_empty_list(self):
        assert delete_task([], "a") == []


class TestLoad:

    @pytest.mark.parametrize("blob", [None, "", "not json", "{broken", '{"not": "an array"}', "42", "null"])
    def test_absent_or_invalid_blob_gives_empty_list(self, blob):
        assert load_tasks(blob) == []

    def test_parses_array_of_records(self):
        blob = '[{"id": "1", "title": "Buy milk", "completed": false}, {"id": "2", "title": "Eggs", "completed": true}]'
        tasks = load_tasks(blob)
        assert tasks == [
            Task(id="1", title="Buy milk", completed=False),
            Task(id="2", title="Eggs", completed=True),
        ]

    def test_skips_malformed_records(self):
        blob = json.dumps([
            {"id": "1", "title": "ok"},
            {"id": "2"},
            {"id": "3", "title": "   "},
            "garbage",
            {"id": "4", "title": "also ok", "completed": True},
        ])
        assert [t.id for t in load_tasks(blob)] == ["1", "4"]

    def test_skips_duplicate_ids(self):
        blob = json.dumps([
            {"id": "1", "title": "first"},
            {"id": "1", "title": "second"},
        ])
        tasks = load_tasks(blob)
        assert len(tasks) == 1
        assert tasks[0].title == "first"

    def test_missing_completed_defaults_to_false(self):
        assert load_tasks('[{"id": "1", "title": "x"}]')[0].completed is False

    def test_numeric_ids_are_read_as_strings(self):
        assert load_tasks('[{"id": 1700000000000, "title": "x"}]')[0].id == "1700000000000"

    def test_round_trip(self, three_tasks):
        assert load_tasks(dump_tasks(three_tasks)) == three_tasks


class TestStrictParse:

    def test_accepts_valid_array(self):
        tasks = parse_task_records([{"id": "1", "title": "Buy milk", "completed": False}], strict=True)
        assert tasks == [Task(id="1", title="Buy milk")]

    def test_accepts_empty_array(self):
        assert parse_task_records([], strict=True) == []

    @pytest.mark.parametrize("data", [
        {"not": "an array"},
        "text",
        None,
        [{"id": "1"}],
        [{"title": "no id"}],
        [{"id": "1", "title": ""}],
        [{"id": "1", "title": "x"}, {"id": "1", "title": "y"}],
        [{"id": "1", "title": "x", "completed": "no"}],
        [{"id": "1", "title": "x", "completed": 1}],
        [{"id": "1", "title": 42, "completed": False}],
        [{"id": 3.5, "title": "x", "completed": False}],
        [{"id": 7, "title": "x"}],
    ])
    def test_rejects_invalid_data(self, data):
        with pytest.raises(InvalidTaskListError):
            parse_task_records(data, strict=True)


def test_dump_empty_list():
    assert dump_tasks([]) == "[]"


def test_dump_record_shape():
    data = json.loads(dump_tasks([Task(id="1", title="Buy milk")]))
    assert data == [{"id": "1", "title": "Buy milk", "completed": False}]


def test_scenario_add_blank_toggle_delete(sequential_ids):
    tasks = []
    tasks = add_task(tasks, "Buy milk", sequential_ids)
    tasks = add_task(tasks, "  ", sequential_ids)
    assert len(tasks) == 1

    milk_id = tasks[0].id
    tasks = toggle_task(tasks, milk_id)
    assert tasks[0].completed is True

    tasks = delete_task(tasks, milk_id)
    assert tasks == []
