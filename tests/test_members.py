import pytest

from kutuphane.db import ConflictError, ValidationError, connect
from kutuphane.members import (
    Member,
    add_member,
    delete_member,
    get_member,
    list_members,
    update_member,
)


@pytest.fixture
def conn():
    connection = connect(":memory:")
    yield connection
    connection.close()


def test_add_and_get_round_trip(conn):
    number = add_member(conn, "Ayşe", "Yılmaz")
    assert get_member(conn, number) == Member(number, "Ayşe", "Yılmaz")


def test_list_members_order(conn):
    first = add_member(conn, "Ayşe", "Yılmaz")
    second = add_member(conn, "Mehmet", "Kaya")
    assert [m.number for m in list_members(conn)] == [first, second]
    assert second > first


@pytest.mark.parametrize("first, last", [("", "Yılmaz"), ("Ayşe", "")])
def test_add_requires_fields(conn, first, last):
    with pytest.raises(ValidationError, match="Gerekli alanları doldurunuz!"):
        add_member(conn, first, last)
    assert list_members(conn) == []


def test_same_name_allowed_twice(conn):
    add_member(conn, "Ayşe", "Yılmaz")
    add_member(conn, "Ayşe", "Yılmaz")
    assert len(list_members(conn)) == 2


def test_update_changes_name(conn):
    number = add_member(conn, "Ayşe", "Yılmaz")
    update_member(conn, number, "Ayşe", "Demir")
    assert get_member(conn, number).last_name == "Demir"


@pytest.mark.parametrize(
    "member_no, first, last", [("", "A", "B"), (1, "", "B"), (1, "A", "")]
)
def test_update_requires_fields(conn, member_no, first, last):
    add_member(conn, "Ayşe", "Yılmaz")
    with pytest.raises(ValidationError):
        update_member(conn, member_no, first, last)
    assert list_members(conn)[0].first_name == "Ayşe"


def test_delete_removes_member(conn):
    number = add_member(conn, "Ayşe", "Yılmaz")
    delete_member(conn, number)
    with pytest.raises(LookupError):
        get_member(conn, number)


def test_delete_requires_selection(conn):
    with pytest.raises(ValidationError, match="Silinecek üyeyi seçiniz!"):
        delete_member(conn, None)


def test_delete_refused_with_outstanding_loans(conn):
    number = add_member(conn, "Ayşe", "Yılmaz")
    conn.execute(
        "INSERT INTO odunc_alinan (uye_no, kitap_no, odunc_alma_tarihi) VALUES (?, ?, ?)",
        (number, 1, "01/02/2024"),
    )
    conn.commit()
    with pytest.raises(ConflictError, match="Bu üye silinemez."):
        delete_member(conn, number)
    assert get_member(conn, number).first_name == "Ayşe"