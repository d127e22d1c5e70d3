"""Tests for metadata validation.

Critical Invariants:
- Bounds are inclusive on text lengths and exclusive on the upper size limit
- Validators never raise, whatever they are given
- register and modify share one field order via check_fields
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from contentreg.core.errors import ErrorCode
from contentreg.core.validation import (
    MAX_BYTE_SIZE,
    MAX_DESCRIPTION_LENGTH,
    MAX_LABEL_COUNT,
    MAX_LABEL_LENGTH,
    MAX_NAME_LENGTH,
    check_fields,
    validate_description,
    validate_label,
    validate_label_set,
    validate_name,
    validate_size,
)

# Label tests


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("", False),
        ("a", True),
        ("x" * MAX_LABEL_LENGTH, True),
        ("x" * (MAX_LABEL_LENGTH + 1), False),
    ],
)
def test_label_length_bounds(tag, expected):
    assert validate_label(tag) is expected


def test_label_set_rejects_empty_and_oversized():
    assert not validate_label_set([])
    assert validate_label_set(["a"] * MAX_LABEL_COUNT)
    assert not validate_label_set(["a"] * (MAX_LABEL_COUNT + 1))


def test_label_set_rejects_any_invalid_member():
    assert not validate_label_set(["ok", ""])
    assert not validate_label_set(["ok", "x" * 33])


def test_label_set_allows_duplicates():
    assert validate_label_set(["same", "same", "same"])


def test_label_set_rejects_bare_string():
    """A string is one label, not a set of single-character labels."""
    assert not validate_label_set("abc")


def test_label_set_accepts_tuples():
    assert validate_label_set(("a", "b"))


@given(st.lists(st.text(min_size=1, max_size=MAX_LABEL_LENGTH), min_size=1, max_size=10))
def test_label_set_accepts_every_in_bounds_list(tags):
    assert validate_label_set(tags)


@given(st.one_of(st.none(), st.integers(), st.floats(), st.binary(), st.dictionaries(st.text(), st.text())))
def test_validators_never_raise(value):
    """Validators return False for junk instead of raising."""
    assert validate_label(value) is False
    assert validate_label_set(value) is False
    assert validate_name(value) is False
    assert validate_description(value) is False


# Name, description and size tests


def test_name_bounds():
    assert not validate_name("")
    assert validate_name("n")
    assert validate_name("n" * MAX_NAME_LENGTH)
    assert not validate_name("n" * (MAX_NAME_LENGTH + 1))


def test_description_bounds():
    assert not validate_description("")
    assert validate_description("d" * MAX_DESCRIPTION_LENGTH)
    assert not validate_description("d" * (MAX_DESCRIPTION_LENGTH + 1))


def test_size_upper_bound_is_exclusive():
    assert validate_size(1)
    assert validate_size(MAX_BYTE_SIZE - 1)
    assert not validate_size(MAX_BYTE_SIZE)
    assert not validate_size(0)
    assert not validate_size(-5)


def test_size_rejects_non_integers():
    assert not validate_size(1.5)
    assert not validate_size("10")
    assert not validate_size(True)


# check_fields ordering


def test_check_fields_all_valid():
    assert check_fields("doc.pdf", 1024, "desc", ["a"]) is None


@pytest.mark.parametrize(
    ("fields", "expected"),
    [
        (("", 1024, "desc", ["a"]), ErrorCode.INVALID_NAME),
        (("doc", 0, "desc", ["a"]), ErrorCode.INVALID_SIZE),
        (("doc", 1024, "", ["a"]), ErrorCode.INVALID_NAME),
        (("doc", 1024, "desc", []), ErrorCode.INVALID_LABELS),
    ],
)
def test_check_fields_maps_each_field_to_its_code(fields, expected):
    assert check_fields(*fields) is expected


def test_check_fields_reports_first_failure():
    """Name is checked before size, size before labels."""
    assert check_fields("", 0, "", []) is ErrorCode.INVALID_NAME
    assert check_fields("ok", 0, "ok", []) is ErrorCode.INVALID_SIZE
