import pytest

from kutuphane.books import list_books
from kutuphane.cli import build_parser, main
from kutuphane.db import connect
from kutuphane.loans import list_loans
from kutuphane.members import list_members
from kutuphane.returns import list_returns


@pytest.fixture
def db(tmp_path):
    return str(tmp_path / "library.db")


def run(db, *args):
    return main(["--db", db, *args])


def test_parser_reads_borrow_date():
    args = build_parser().parse_args(["loans", "borrow", "1", "2", "--date", "05/03/2024"])
    assert (args.member, args.book, args.date.day, args.date.month) == ("1", "2", 5, 3)


def test_parser_rejects_bad_date():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["loans", "borrow", "1", "2", "--date", "2024-03-05"])


def test_add_and_list_books(db, capsys):
    assert run(db, "books", "add", "Dune", "3") == 0
    assert "Yeni kayıt eklendi!" in capsys.readouterr().out
    assert run(db, "books", "list") == 0
    assert "Dune\t3" in capsys.readouterr().out
    conn = connect(db)
    assert [(b.name, b.stock) for b in list_books(conn)] == [("Dune", 3)]
    conn.close()


def test_duplicate_book_fails(db, capsys):
    run(db, "books", "add", "Dune", "3")
    capsys.readouterr()
    assert run(db, "books", "add", "Dune", "1") == 1
    assert "Aynı isimde kitap girdisi bulunmaktadır" in capsys.readouterr().err


def test_member_update_and_delete(db, capsys):
    run(db, "members", "add", "Ayşe", "Yılmaz")
    assert run(db, "members", "update", "1", "Ayşe", "Kaya") == 0
    conn = connect(db)
    assert [(m.first_name, m.last_name) for m in list_members(conn)] == [("Ayşe", "Kaya")]
    conn.close()
    assert run(db, "members", "delete", "1") == 0
    assert "Üye silindi!" in capsys.readouterr().out
    conn = connect(db)
    assert list_members(conn) == []
    conn.close()


def test_borrow_and_return_flow(db, capsys):
    run(db, "books", "add", "Dune", "1")
    run(db, "members", "add", "Ayşe", "Yılmaz")
    assert run(db, "loans", "borrow", "1", "1", "--date", "01/01/2024") == 0
    conn = connect(db)
    assert [loan.borrowed for loan in list_loans(conn)] == ["01/01/2024"]
    conn.close()
    assert run(db, "members", "delete", "1") == 1
    assert run(db, "returns", "return", "1", "1", "--date", "02/01/2024") == 0
    conn = connect(db)
    records = list_returns(conn)
    assert [(r.borrowed, r.returned, r.fine) for r in records] == [
        ("01/01/2024", "02/01/2024", 0)
    ]
    assert list_loans(conn) == []
    conn.close()


def test_missing_book_show_fails(db, capsys):
    assert run(db, "books", "show", "42") == 1
    assert "42" in capsys.readouterr().err