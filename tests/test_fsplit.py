import pytest

from dosutils.fsplit import chunk_lines, main, split_file


def test_chunks_hold_at_most_max_lines():
    lines = [f"{n}\n" for n in range(7)]
    chunks = list(chunk_lines(lines, 3))
    assert [len(c) for c in chunks] == [3, 3, 1]
    assert [line for chunk in chunks for line in chunk] == lines


def test_exact_multiple_produces_no_trailing_empty_chunk():
    lines = ["a\n", "b\n", "c\n", "d\n"]
    chunks = list(chunk_lines(lines, 2))
    assert chunks == [["a\n", "b\n"], ["c\n", "d\n"]]


def test_empty_input_yields_one_empty_chunk():
    assert list(chunk_lines([], 5)) == [[]]


@pytest.mark.parametrize("count", [0, -1])
def test_non_positive_count_rejected(count):
    with pytest.raises(ValueError):
        list(chunk_lines(["x\n"], count))


def test_split_file_round_trip(tmp_path):
    source = tmp_path / "input.txt"
    text = "".join(f"line {n}\r\n" for n in range(10))
    source.write_bytes(text.encode("latin-1"))
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    written = split_file(source, 4, out_dir)
    assert [p.name for p in written] == ["file1.txt", "file2.txt", "file3.txt"]
    assert b"".join(p.read_bytes() for p in written) == text.encode("latin-1")


def test_main_wrong_argument_count(capsys):
    assert main(["only-one"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt"), "3"]) == 1
    assert "Cannot open file." in capsys.readouterr().err


def test_main_writes_into_current_directory(tmp_path, monkeypatch):
    source = tmp_path / "data.txt"
    source.write_text("1\n2\n3\n")
    monkeypatch.chdir(tmp_path)
    assert main([str(source), "2"]) == 0
    assert (tmp_path / "file1.txt").read_text() == "1\n2\n"
    assert (tmp_path / "file2.txt").read_text() == "3\n"