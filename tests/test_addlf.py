import io
import sys

import pytest

from dosutils.addlf import add_linefeeds, main


def test_linefeed_follows_carriage_return():
    assert add_linefeeds(b"a\rb") == b"a\r\nb"


def test_data_without_carriage_returns_is_unchanged():
    data = b"plain text\nwith unix endings\n"
    assert add_linefeeds(data) == data


@pytest.mark.parametrize("data", [b"", b"\r", b"\r\r\r", b"x\ry\rz", bytes(range(256))])
def test_every_carriage_return_gets_one_linefeed(data):
    result = add_linefeeds(data)
    assert len(result) == len(data) + data.count(b"\r")
    assert result.replace(b"\r\n", b"\r") == data.replace(b"\r\n", b"\r") or b"\r\n" in data


def test_removing_inserted_linefeeds_restores_input():
    data = b"one\rtwo\rthree"
    assert add_linefeeds(data).replace(b"\r\n", b"\r") == data


def test_main_filters_stdin(monkeypatch, capsysbinary):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"line1\rline2\r")))
    assert main([]) == 0
    out = capsysbinary.readouterr().out
    assert out == add_linefeeds(b"line1\rline2\r")
    assert out.count(b"\r\n") == 2