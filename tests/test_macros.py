import pytest

from dosutils.macros import MAX_DEFINES, DefineError, DefineTable, split_definition


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("ONE one", ("ONE", "one")),
        ("TWO", ("TWO", "")),
        ("THREE three four five six", ("THREE", "three four five six")),
        ("THIS=THAT", ("THIS", "THAT")),
        ("THEOTHER=SPAM", ("THEOTHER", "SPAM")),
    ],
)
def test_split_definition(spec, expected):
    assert split_definition(spec) == expected


def test_source_sequence():
    table = DefineTable()
    table.add("ONE one")
    table.add("TWO")
    table.add("THREE three four five six")
    with pytest.raises(DefineError):
        table.add("TWO newtwo")
    assert table.value("TWO") == ""
    table.add("TWO newtwo_for_real", override=True)
    table.add("THIS=THAT")
    table.add("THEOTHER=SPAM", override=True)
    assert table.items() == [
        ("ONE", "one"),
        ("TWO", "newtwo_for_real"),
        ("THREE", "three four five six"),
        ("THIS", "THAT"),
        ("THEOTHER", "SPAM"),
    ]
    assert table.is_defined("ONE")
    assert not table.is_defined("SPAM")


def test_value_missing_raises_key_error():
    with pytest.raises(KeyError):
        DefineTable().value("NOPE")


def test_remove_and_slot_reuse():
    table = DefineTable()
    table.add("A 1")
    table.add("B 2")
    table.add("C 3")
    assert table.remove("B") is True
    assert table.remove("B") is False
    assert "B" not in table
    table.add("D 4")
    assert [name for name, _ in table.items()] == ["A", "D", "C"]
    assert len(table) == 3


def test_capacity_limit():
    table = DefineTable()
    for number in range(MAX_DEFINES):
        table.add(f"N{number} v")
    with pytest.raises(DefineError):
        table.add("EXTRA x")
    assert len(table) == MAX_DEFINES
    table.remove("N5")
    table.add("EXTRA x")
    assert table.value("EXTRA") == "x"


def test_override_on_full_table_keeps_slot():
    table = DefineTable(capacity=2)
    table.add("A 1")
    table.add("B 2")
    table.add("A 9", override=True)
    assert table.items() == [("A", "9"), ("B", "2")]


def test_empty_name_rejected():
    with pytest.raises(DefineError):
        DefineTable().add("=value")


def test_substitute_replaces_all_occurrences():
    table = DefineTable()
    table.add("NAME world")
    table.add("X=y")
    assert table.substitute("hello %NAME%, %NAME%! %X%") == "hello world, world! y"


def test_substitute_leaves_unknown_and_bare_names():
    table = DefineTable()
    table.add("NAME world")
    line = "NAME %OTHER% %NAME"
    assert table.substitute(line) == line


def test_substitute_empty_value_removes_macro():
    table = DefineTable()
    table.add("EMPTY")
    assert table.substitute("a%EMPTY%b") == "ab"


def test_iteration_yields_names():
    table = DefineTable()
    table.add("P 1")
    table.add("Q 2")
    assert list(table) == ["P", "Q"]