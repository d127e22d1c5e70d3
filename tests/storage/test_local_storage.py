"""Unit tests for LocalStorage.

Critical Invariants:
- Store key always equals the record's sequence_id
- insert/update/remove fail cleanly instead of overwriting or inventing keys
- commit_registration advances counter, records and grants together or not at all
"""

import pytest

from contentreg.core.record import ContentRecord
from contentreg.storage.local import LocalStorage


def _record(sequence_id: int, proprietor: str = "alice") -> ContentRecord:
    return ContentRecord(
        sequence_id=sequence_id,
        display_name="doc.pdf",
        proprietor=proprietor,
        byte_size=1024,
        registration_height=5,
        description="desc",
        classification_labels=("a",),
    )


@pytest.fixture
def storage():
    return LocalStorage()


def test_get_missing_returns_none(storage):
    assert storage.get(1) is None
    assert not storage.contains(1)


def test_insert_rejects_existing_id(storage):
    assert storage.insert(1, _record(1))
    assert not storage.insert(1, _record(1, proprietor="bob"))
    assert storage.get(1).proprietor == "alice"


def test_insert_rejects_mismatched_key(storage):
    with pytest.raises(ValueError, match="does not match"):
        storage.insert(2, _record(1))


def test_update_requires_presence(storage):
    assert not storage.update(1, _record(1))
    assert storage.get(1) is None

    storage.insert(1, _record(1))
    assert storage.update(1, _record(1, proprietor="bob"))
    assert storage.get(1).proprietor == "bob"


def test_remove_requires_presence(storage):
    assert not storage.remove(1)
    storage.insert(1, _record(1))
    assert storage.remove(1)
    assert not storage.contains(1)


def test_record_ids_are_sorted(storage):
    for sequence_id in (3, 1, 2):
        storage.insert(sequence_id, _record(sequence_id))
    assert list(storage.record_ids()) == [1, 2, 3]


def test_commit_registration_advances_all_collections(storage):
    record = _record(storage.peek_next_id())

    assert storage.commit_registration(record)

    assert storage.last_id == 1
    assert storage.get(1) == record
    assert storage.is_granted(1, "alice")


def test_commit_registration_into_occupied_slot_changes_nothing(storage):
    """CRITICAL: A colliding registration leaves counter, records and grants untouched.

    Why: The three collections must advance as one unit.
    """
    squatter = _record(1, proprietor="bob")
    storage.insert(1, squatter)

    assert not storage.commit_registration(_record(1))

    assert storage.last_id == 0
    assert storage.get(1) is squatter
    assert not storage.is_granted(1, "alice")


def test_commit_registration_requires_next_id(storage):
    with pytest.raises(ValueError, match="next id is 1"):
        storage.commit_registration(_record(5))
    assert storage.last_id == 0


def test_remove_keeps_grants(storage):
    storage.commit_registration(_record(1))
    storage.remove(1)

    assert storage.is_granted(1, "alice")


def test_snapshot_restore_round_trip(storage):
    storage.commit_registration(_record(1))
    storage.commit_registration(_record(2, proprietor="bob"))
    storage.remove(1)

    restored = LocalStorage()
    restored.restore(storage.snapshot())

    assert restored.last_id == 2
    assert restored.get(1) is None
    assert restored.get(2) == storage.get(2)
    assert restored.is_granted(1, "alice")
    assert restored.peek_next_id() == 3


def test_restore_rejects_unknown_version(storage):
    import pickle

    with pytest.raises(ValueError, match="Unsupported snapshot version"):
        storage.restore(pickle.dumps({"version": 99}))


def _raw_snapshot(last_id, records):
    import pickle

    return pickle.dumps({"version": 1, "last_id": last_id, "records": records, "access": {}})


def test_restore_rejects_record_under_wrong_key(storage):
    """CRITICAL: Store key must equal the record's sequence_id after a restore too.

    Why: insert/update enforce the invariant, a snapshot must not bypass it.
    """
    storage.commit_registration(_record(1))

    with pytest.raises(ValueError, match="does not match"):
        storage.restore(_raw_snapshot(7, {1: _record(7)}))

    assert storage.last_id == 1
    assert storage.get(1) == _record(1)


def test_restore_rejects_record_beyond_counter(storage):
    """A record above last_id would block every later registration."""
    with pytest.raises(ValueError, match="beyond last issued id"):
        storage.restore(_raw_snapshot(0, {1: _record(1)}))

    assert storage.last_id == 0
    assert storage.get(1) is None
    assert storage.commit_registration(_record(1))


def test_len_counts_active_records(storage):
    storage.commit_registration(_record(1))
    storage.commit_registration(_record(2))
    storage.remove(1)

    assert len(storage) == 1
