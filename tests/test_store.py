"""Tests for the in-memory cat store and sample loading."""

import json

import pytest

from catdistribution import config
from catdistribution.catalog.schemas import CreateCatRequest, UpdateCatRequest
from catdistribution.catalog.store import CatStore, load_sample_cats

from conftest import make_cat


def test_list_returns_snapshot(store, cats):
    snapshot = store.list()
    snapshot.clear()
    assert len(store) == len(cats)


def test_get_is_case_insensitive(store):
    assert store.get("MIMI").name == "Mimi"
    assert store.get("nobody") is None


def test_add_assigns_id(store):
    cat = store.add(CreateCatRequest(name="Pixel", age=2, breed="Bengal"))
    assert cat.id
    assert store.get("pixel") == cat


def test_duplicate_names_rejected(store):
    with pytest.raises(ValueError):
        store.add(CreateCatRequest(name="tom", age=2))
    with pytest.raises(ValueError):
        store.append(make_cat("MIMI", 3, id="zz"))


def test_update_merges_fields(store):
    updated = store.update("Tom", UpdateCatRequest(age=6, description="Older now"))
    assert updated.age == 6
    assert updated.description == "Older now"
    assert updated.breed == "British Shorthair"
    assert store.get("Tom") == updated


def test_update_rename(store):
    store.update("Tom", UpdateCatRequest(name="Thomas"))
    assert store.get("Tom") is None
    assert store.get("Thomas").age == 5
    # renaming to its own name with different case is allowed
    store.update("Thomas", UpdateCatRequest(name="THOMAS"))
    with pytest.raises(ValueError):
        store.update("THOMAS", UpdateCatRequest(name="Mimi"))


def test_update_and_delete_missing(store):
    with pytest.raises(KeyError):
        store.update("Ghost", UpdateCatRequest(age=1))
    with pytest.raises(KeyError):
        store.delete("Ghost")


def test_delete(store):
    removed = store.delete("garfield")
    assert removed.name == "Garfield"
    assert "Garfield" not in store.names()


def test_invalid_requests():
    with pytest.raises(ValueError):
        CreateCatRequest(name="", age=1)
    with pytest.raises(ValueError):
        CreateCatRequest(name="Neg", age=-1)
    with pytest.raises(ValueError):
        CreateCatRequest(name="Heavy", age=1, weight=0)


def test_bundled_sample_data_loads():
    cats = load_sample_cats(config.DATA_FILE)
    assert len(cats) >= 10
    assert len({c.name for c in cats}) == len(cats)
    assert CatStore(cats).get("Mimi").age == 1


def test_load_sample_skips_bad_entries(tmp_path):
    path = tmp_path / "cats.json"
    path.write_text(json.dumps([{"id": 1, "name": "Ok", "age": 3}, {"name": "Bad", "age": -4}]))
    cats = load_sample_cats(path)
    assert [c.name for c in cats] == ["Ok"]
    assert cats[0].id == "1"


def test_load_sample_missing_file(tmp_path):
    assert load_sample_cats(tmp_path / "missing.json") == []


def test_reserved_names_rejected(store):
    with pytest.raises(ValueError):
        store.append(make_cat("selected", 1))
    with pytest.raises(ValueError):
        CreateCatRequest(name=" Operation-Logs ", age=1)
    with pytest.raises(ValueError):
        UpdateCatRequest(name="statistics")
    assert "selected" not in store.names()


def test_load_sample_requires_a_list(tmp_path, caplog):
    path = tmp_path / "cats.json"
    path.write_text(json.dumps({"cats": [{"name": "Ok", "age": 3}]}))
    assert load_sample_cats(path) == []
    assert "Expected a list of cats" in caplog.text


def test_load_sample_skips_non_object_entries(tmp_path):
    path = tmp_path / "cats.json"
    path.write_text(json.dumps(["Mimi", {"name": "Ok", "age": 3}]))
    assert [c.name for c in load_sample_cats(path)] == ["Ok"]
