# File: tests/test_project_store.py

from roomify_api.services.kv_store import SqlKeyValueStore
from roomify_api.services.project_store import Namespace, ProjectStore


def test_save_then_load_roundtrip(store_for, alice):
    store = store_for(alice)
    saved = store.save(Namespace.PRIVATE, "p1", {"id": "p1", "sourceImage": "img.png", "rooms": 3})

    loaded = store.load(Namespace.PRIVATE, "p1")
    assert loaded == saved
    assert loaded["rooms"] == 3
    assert loaded["updatedAt"].endswith("Z")


def test_save_refreshes_updated_at(store_for, alice):
    store = store_for(alice)
    first = store.save(Namespace.PRIVATE, "p1", {"id": "p1", "sourceImage": "a.png"})
    second = store.save(Namespace.PRIVATE, "p1", {**first, "sourceImage": "b.png"})

    assert second["updatedAt"] >= first["updatedAt"]
    assert store.load(Namespace.PRIVATE, "p1")["sourceImage"] == "b.png"


def test_load_missing_returns_none(store_for, alice):
    assert store_for(alice).load(Namespace.PRIVATE, "nope") is None


def test_remove_is_idempotent(store_for, alice):
    store = store_for(alice)
    store.save(Namespace.PRIVATE, "p1", {"id": "p1", "sourceImage": "img.png"})

    store.remove(Namespace.PRIVATE, "p1")
    store.remove(Namespace.PRIVATE, "p1")

    assert store.load(Namespace.PRIVATE, "p1") is None


def test_namespaces_use_distinct_keys(store_for, alice):
    store = store_for(alice)
    store.save(Namespace.PRIVATE, "p1", {"id": "p1", "sourceImage": "img.png"})

    assert store.load(Namespace.PUBLIC, "p1") is None
    assert store.key(Namespace.PRIVATE, "p1") == "roomify_project_p1"
    assert store.key(Namespace.PUBLIC, "p1") == "roomify_public_p1"


def test_list_public_tags_every_record(store_for, alice):
    store = store_for(alice)
    store.save(Namespace.PUBLIC, "p1", {"id": "p1", "sourceImage": "a.png"})
    store.save(Namespace.PUBLIC, "p2", {"id": "p2", "sourceImage": "b.png"})
    store.save(Namespace.PRIVATE, "p3", {"id": "p3", "sourceImage": "c.png"})

    projects = store.list_all(Namespace.PUBLIC)

    assert sorted(p["id"] for p in projects) == ["p1", "p2"]
    assert all(p["isPublic"] is True for p in projects)


def test_private_namespace_is_per_user(store_for, alice, bob):
    store_for(alice).save(Namespace.PRIVATE, "p1", {"id": "p1", "sourceImage": "img.png"})

    assert store_for(bob).load(Namespace.PRIVATE, "p1") is None
    assert store_for(bob).list_all(Namespace.PRIVATE) == []


def test_public_namespace_is_shared(store_for, alice, bob):
    store_for(alice).save(Namespace.PUBLIC, "p1", {"id": "p1", "sourceImage": "img.png"})

    assert store_for(bob).load(Namespace.PUBLIC, "p1")["id"] == "p1"


def test_kv_list_treats_prefix_literally(db):
    kv = SqlKeyValueStore(db, scope="s")
    kv.set("a_1", 1)
    kv.set("ab1", 2)

    assert [e.key for e in kv.list("a_")] == ["a_1"]


def test_kv_set_overwrites(db):
    kv = SqlKeyValueStore(db, scope="s")
    kv.set("k", {"v": 1})
    kv.set("k", {"v": 2})

    assert kv.get("k") == {"v": 2}
    assert len(kv.list("k")) == 1
