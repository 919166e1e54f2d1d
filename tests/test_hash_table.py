import pytest

from dsakit.hash_table import ChainedHashTable, DirectHashTable, Record

BOOKS = [
    Record(1701, "Internet of Things", "G1 Shelf"),
    Record(1712, "Statistical Analysis", "G1 Shelf"),
    Record(1718, "Grid Computing", "H2 Shelf"),
    Record(1735, "UML Modeling", "G1 Shelf"),
    Record(1752, "Professional Practices", "G2 Shelf"),
]


def test_direct_insert_and_search():
    table = DirectHashTable(11)
    table.insert(BOOKS[0])
    assert table.search(1701) == BOOKS[0]
    assert len(table) == 1


def test_direct_search_missing_raises():
    table = DirectHashTable(11)
    with pytest.raises(KeyError):
        table.search(1701)


def test_direct_delete():
    table = DirectHashTable(11)
    table.insert(BOOKS[0])
    table.delete(1701)
    assert len(table) == 0
    with pytest.raises(KeyError):
        table.search(1701)
    with pytest.raises(KeyError):
        table.delete(1701)


def test_direct_collision_replaces_occupant():
    table = DirectHashTable(11)
    table.insert(Record(1, "a", "x"))
    table.insert(Record(12, "b", "y"))
    assert table.search(12).title == "b"
    with pytest.raises(KeyError):
        table.search(1)
    assert len(table) == 1


def test_direct_full_table_raises():
    table = DirectHashTable(2)
    table.insert(Record(0))
    table.insert(Record(1))
    with pytest.raises(OverflowError):
        table.insert(Record(2))


def test_invalid_sizes():
    with pytest.raises(ValueError):
        DirectHashTable(0)
    with pytest.raises(ValueError):
        ChainedHashTable(0)


def test_chained_insert_and_search_all():
    table = ChainedHashTable(11)
    for book in BOOKS:
        assert table.insert(book) is True
    assert len(table) == len(BOOKS)
    for book in BOOKS:
        assert table.search(book.key) == book


def test_chained_duplicate_insert_rejected():
    table = ChainedHashTable(11)
    assert table.insert(BOOKS[0]) is True
    assert table.insert(Record(1701, "Other", "Z9 Shelf")) is False
    assert table.search(1701) == BOOKS[0]


def test_chained_collisions_kept():
    table = ChainedHashTable(11)
    table.insert(Record(1, "a"))
    table.insert(Record(12, "b"))
    assert table.search(1).title == "a"
    assert table.search(12).title == "b"


def test_chained_delete():
    table = ChainedHashTable(11)
    for book in BOOKS:
        table.insert(book)
    table.insert(Record(1725, "Deep Learning with Python", "C3 Shelf"))
    table.delete(1701)
    table.delete(1718)
    assert len(table) == len(BOOKS) - 1
    with pytest.raises(KeyError):
        table.search(1701)
    with pytest.raises(KeyError):
        table.delete(1718)
    assert table.search(1725).title == "Deep Learning with Python"


def test_show_empty_table():
    lines = ChainedHashTable(2).show().splitlines()
    assert lines == [
        "Index\tValue (Key, Title, PlacementInfo)",
        "0\t[EMPTY BUCKET]",
        "1\t[EMPTY BUCKET]",
    ]


def test_show_lists_chain():
    table = ChainedHashTable(1)
    table.insert(BOOKS[0])
    table.insert(BOOKS[1])
    lines = table.show().splitlines()
    assert lines[1] == (
        "0\t--> (1701, Internet of Things, G1 Shelf)"
        "--> (1712, Statistical Analysis, G1 Shelf)"
    )