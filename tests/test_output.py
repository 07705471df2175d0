"""Tests for plain-text table rendering."""

from ctr_core.output import TableOutput


def test_columns_are_padded_to_widest_cell() -> None:
    table = TableOutput([["HOSTNAME", "USERNAME"], ["localhost:5000", "admin"], ["a", ""]])

    assert table.format().splitlines() == [
        "HOSTNAME        USERNAME",
        "localhost:5000  admin",
        "a",
    ]


def test_empty_table() -> None:
    assert TableOutput([]).format() == ""
