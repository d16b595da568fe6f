"""Tests for the memory store and the tag layer on top of it."""

from model_finder import MemoryCacheStore, tags


def test_memory_store_put_get_forget(store):
    """Test basic put, get and forget."""
    store.put("k", "v", ttl=10)
    assert store.get("k") == "v"
    assert store.forget("k") is True
    assert store.get("k") is None
    assert store.forget("k") is False


def test_memory_store_expires_entries(store, clock):
    """Test entries disappear once their TTL has passed."""
    store.put("k", "v", ttl=10)
    clock.advance(9)
    assert store.get("k") == "v"
    clock.advance(1)
    assert store.get("k") is None


def test_memory_store_forever_and_flush(store, clock):
    """Test forever entries never expire and flush removes everything."""
    store.forever("k", "v")
    clock.advance(10**9)
    assert store.get("k") == "v"
    store.flush()
    assert len(store) == 0


def test_memory_store_returns_copies(store):
    """Test each read returns an independent copy of the stored value."""
    value = {"name": "Alice"}
    store.put("k", value, ttl=10)
    value["name"] = "changed"

    first = store.get("k")
    first["name"] = "mutated"

    assert store.get("k") == {"name": "Alice"}
    assert store.get("k") is not store.get("k")


def test_memory_store_sweeps_expired_entries_on_write(store, clock):
    """Test orphaned entries left by tag flushes are removed once expired."""
    for i in range(100):
        tags(store, ["model-finder", "person"]).put(f"value-{i}", "row", ttl=60)
        tags(store, "person").flush()

    clock.advance(61)
    tags(store, ["model-finder", "person"]).put("fresh", "row", ttl=60)

    # two tag ids plus the fresh entry
    assert len(store) == 3


def test_tagged_entries_need_the_same_tags(store):
    """Test an entry is only visible under the tags it was stored with."""
    tags(store, ["model-finder", "person"]).put("alice", "row", ttl=60)

    assert tags(store, ["model-finder", "person"]).get("alice") == "row"
    assert tags(store, "person").get("alice") is None
    assert store.get("alice") is None


def test_flushing_one_tag_leaves_other_tags(store):
    """Test flushing one model tag keeps entries of other models."""
    people = tags(store, ["model-finder", "person"])
    posts = tags(store, ["model-finder", "blog_post"])
    people.put("alice", "person-row", ttl=60)
    posts.put("alice", "post-row", ttl=60)

    tags(store, "person").flush()

    assert people.get("alice") is None
    assert posts.get("alice") == "post-row"


def test_flushing_global_tag_clears_every_model(store):
    """Test flushing the global tag clears entries of every model."""
    people = tags(store, ["model-finder", "person"])
    posts = tags(store, ["model-finder", "blog_post"])
    people.put("alice", "person-row", ttl=60)
    posts.put("hello", "post-row", ttl=60)

    tags(store, "model-finder").flush()

    assert not people.has("alice")
    assert not posts.has("hello")


def test_remember_only_calls_producer_on_miss(store):
    """Test remember calls the producer once."""
    handle = tags(store, "person")
    calls = []

    def produce():
        calls.append(1)
        return "row"

    assert handle.remember("alice", 60, produce) == "row"
    assert handle.remember("alice", 60, produce) == "row"
    assert len(calls) == 1


def test_flush_changes_the_item_namespace():
    """Test flushing a tag moves its entries to a new namespace."""
    store = MemoryCacheStore()
    handle = tags(store, "person")
    first = handle.tagged_item_key("alice")
    assert handle.tagged_item_key("alice") == first
    handle.flush()
    assert handle.tagged_item_key("alice") != first
