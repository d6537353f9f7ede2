"""
Unit tests for the in-memory project store.

Run: pytest tests/test_store.py -v
"""

import re

from project_tracker_api.app.data.project_store import ProjectStore, utc_now_iso
from project_tracker_api.app.schemas.project import ProjectStatus
from tests.helpers import run


def make(name="Project", client_name="Client", start_date="2026-01-01", **extra):
    data = {
        "name": name,
        "client_name": client_name,
        "status": ProjectStatus.ACTIVE,
        "start_date": start_date,
        "end_date": None,
    }
    data.update(extra)
    return data


def test_utc_now_iso_format():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_now_iso())


def test_create_assigns_generated_fields(store):
    project = run(store.create(make()))
    assert project.id
    assert project.is_deleted is False
    assert project.created_at == project.updated_at
    assert project.status is ProjectStatus.ACTIVE


def test_create_generates_unique_ids(store):
    ids = {run(store.create(make())).id for _ in range(20)}
    assert len(ids) == 20


def test_returned_models_are_copies(store):
    project = run(store.create(make(name="Original")))
    project.name = "Changed"
    fetched = run(store.find_by_id(project.id))
    assert fetched.name == "Original"
    fetched.status = ProjectStatus.COMPLETED
    assert run(store.find_by_id(project.id)).status is ProjectStatus.ACTIVE


def test_find_by_id_unknown_returns_none(store):
    assert run(store.find_by_id("missing")) is None


def test_find_by_id_returns_deleted_records(store):
    project = run(store.create(make()))
    run(store.update(project.id, {"is_deleted": True}))
    assert run(store.find_by_id(project.id)).is_deleted is True


def test_find_all_excludes_deleted(store):
    kept = run(store.create(make(name="Kept")))
    gone = run(store.create(make(name="Gone")))
    run(store.update(gone.id, {"is_deleted": True}))
    assert [p.id for p in run(store.find_all())] == [kept.id]


def test_find_all_filters_compose(store):
    run(store.create(make(name="Website", client_name="Acme")))
    run(store.create(make(name="Mobile App", client_name="ACME Corp", status=ProjectStatus.ON_HOLD)))
    run(store.create(make(name="Website", client_name="Globex", status=ProjectStatus.ON_HOLD)))

    on_hold = run(store.find_all(status="on_hold"))
    assert {p.client_name for p in on_hold} == {"ACME Corp", "Globex"}

    acme = run(store.find_all(search="acme"))
    assert {p.name for p in acme} == {"Website", "Mobile App"}

    both = run(store.find_all(status="on_hold", search="acme"))
    assert [p.name for p in both] == ["Mobile App"]


def test_find_all_sorts_by_start_date(store):
    for start in ["2026-03-01", "2026-01-01", "2026-02-01"]:
        run(store.create(make(start_date=start)))
    asc = [p.start_date for p in run(store.find_all(sort="startDate", order="asc"))]
    desc = [p.start_date for p in run(store.find_all(sort="startDate"))]
    assert asc == ["2026-01-01", "2026-02-01", "2026-03-01"]
    assert desc == list(reversed(asc))


def test_find_all_unknown_sort_falls_back_to_created_at(store):
    for index, created in enumerate(["2026-01-02T00:00:00.000Z", "2026-01-01T00:00:00.000Z"]):
        run(store.create(make(name=f"P{index}")))
        store._projects[-1]["created_at"] = created
    names = [p.name for p in run(store.find_all(sort="name", order="asc"))]
    assert names == ["P1", "P0"]


def test_find_all_keeps_insertion_order_for_equal_keys(store):
    for name in ["first", "second", "third"]:
        run(store.create(make(name=name, start_date="2026-01-01")))
    asc = [p.name for p in run(store.find_all(sort="startDate", order="asc"))]
    desc = [p.name for p in run(store.find_all(sort="startDate", order="desc"))]
    assert asc == ["first", "second", "third"]
    assert desc == ["first", "second", "third"]


def test_update_merges_fields_and_bumps_updated_at(store):
    project = run(store.create(make(name="Keep me")))
    store._projects[0]["updated_at"] = "2000-01-01T00:00:00.000Z"
    updated = run(store.update(project.id, {"status": ProjectStatus.ON_HOLD}))
    assert updated.status is ProjectStatus.ON_HOLD
    assert updated.name == "Keep me"
    assert updated.created_at == project.created_at
    assert updated.updated_at > "2000-01-01T00:00:00.000Z"


def test_update_unknown_returns_none(store):
    assert run(store.update("missing", {"status": "completed"})) is None


def test_clear_resets_records(store):
    run(store.create(make()))
    run(store.clear())
    assert run(store.find_all()) == []


def test_stores_are_independent():
    first, second = ProjectStore(), ProjectStore()
    run(first.create(make()))
    assert run(second.find_all()) == []
