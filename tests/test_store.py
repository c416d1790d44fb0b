"""Tests for building stores from datasets."""
import json

import pytest
from pydantic import ValidationError

from planner.config import BUNDLED_DATA_FILE
from planner.models.base import parse_id
from planner.store import RecordStore, load_store
from tests.conftest import SEED_DATA


class TestDataset:
    def test_from_dataset(self, seeded_store):
        assert [len(c) for c in seeded_store.collections()] == [2, 3, 2, 3]
        assert seeded_store.events.records[0].from_ == "12:00"

    def test_missing_keys_are_empty(self):
        store = RecordStore.from_dataset({"users": SEED_DATA["users"]})
        assert len(store.users) == 2
        assert len(store.events) == 0

    def test_counter_continues_after_highest_id(self):
        store = RecordStore.from_dataset({"users": [{"id": 7, "username": "a", "email": "a@x.com"}]})
        assert store.users.next_id() == 8
        assert store.events.next_id() == 1

    def test_load_store(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps(SEED_DATA))
        store = load_store(path)
        assert store.locations.records[1].name == "Riverside"

    def test_bundled_dataset_loads(self):
        store = load_store(BUNDLED_DATA_FILE)
        assert len(store.users) > 0
        assert len(store.events) > 0

    def test_malformed_record_rejected(self):
        with pytest.raises(ValidationError):
            RecordStore.from_dataset({"locations": [{"id": 1}]})

    def test_stores_are_isolated(self, store, seeded_store):
        assert len(store.users) == 0
        assert len(seeded_store.users) == 2


class TestParseId:
    @pytest.mark.parametrize("value,expected", [
        (3, 3),
        ("3", 3),
        (" 3 ", 3),
        ("3.0", 3),
        (3.0, 3),
        ("3.5", None),
        ("abc", None),
        ("", None),
        (None, None),
        (True, None),
    ])
    def test_parse_id(self, value, expected):
        assert parse_id(value) == expected
