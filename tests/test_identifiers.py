from __future__ import annotations

from itertools import permutations
from typing import Callable

import pytest

from academy.core.exceptions import InvalidIdentifierError
from academy.core.identifiers import (
    EntityId,
    InvoiceId,
    StudentId,
    TeacherId,
    UserId,
    create_invoice_id,
    create_student_id,
    create_teacher_id,
    create_user_id,
)

FACTORIES: list[Callable[[object], EntityId]] = [
    create_student_id,
    create_teacher_id,
    create_user_id,
    create_invoice_id,
]


def test_factories_wrap_valid_values() -> None:
    sid = create_student_id("abc-123")

    assert isinstance(sid, StudentId)
    assert isinstance(sid, str)
    assert sid == "abc-123"
    assert isinstance(create_teacher_id("t1"), TeacherId)
    assert isinstance(create_user_id("u1"), UserId)
    assert isinstance(create_invoice_id("i1"), InvoiceId)


def test_surrounding_whitespace_is_stripped() -> None:
    assert create_user_id("  u1 ") == "u1"


@pytest.mark.parametrize("value", ["", "   ", None, 42])
def test_invalid_values_are_rejected(value: object) -> None:
    with pytest.raises(InvalidIdentifierError) as info:
        create_student_id(value)

    assert info.value.message == "Invalid student ID"


def test_kinds_do_not_mix() -> None:
    student_id = create_student_id("same")
    teacher_id = create_teacher_id("same")

    assert student_id != teacher_id
    assert not (student_id == teacher_id)
    assert student_id == "same"


@pytest.mark.parametrize("make_a, make_b", list(permutations(FACTORIES, 2)))
def test_every_pair_of_kinds_is_distinct(
    make_a: Callable[[object], EntityId], make_b: Callable[[object], EntityId]
) -> None:
    assert make_a("same") != make_b("same")

    with pytest.raises(InvalidIdentifierError):
        make_b(make_a("x1"))


def test_invalid_invoice_id_names_its_kind() -> None:
    with pytest.raises(InvalidIdentifierError) as info:
        create_invoice_id("")

    assert info.value.message == "Invalid invoice ID"


def test_one_kind_cannot_be_rewrapped_as_another() -> None:
    with pytest.raises(InvalidIdentifierError):
        create_teacher_id(create_student_id("s1"))


def test_rewrapping_same_kind_is_allowed() -> None:
    sid = create_student_id("s1")

    assert create_student_id(sid) == sid


def test_identifiers_hash_like_strings() -> None:
    sid = create_student_id("s1")

    assert {sid: 1}["s1"] == 1
    assert repr(sid) == "StudentId('s1')"
