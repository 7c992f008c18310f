import io
from unittest.mock import patch

import pytest

from gymdesk.console import Console


def make(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out, None), out


def test_write():
    console, out = make("")
    console.write("Gestore Palestra\n")
    assert out.getvalue() == "Gestore Palestra\n"


def test_read_token_sequence():
    console, _ = make("  Mario\tRossi\nCLT001")
    assert console.read_token() == "Mario"
    assert console.read_token() == "Rossi"
    assert console.read_token() == "CLT001"


def test_read_token_eof():
    console, _ = make("   \n ")
    with pytest.raises(EOFError):
        console.read_token()


def test_read_int():
    console, _ = make(" 12 -3\n")
    assert console.read_int() == 12
    assert console.read_int() == -3


def test_read_int_invalid():
    console, _ = make("abc\n")
    with pytest.raises(ValueError):
        console.read_int()


def test_read_choice_skips_blanks():
    console, _ = make("\n\n 3\n5")
    assert console.read_choice() == "3"
    assert console.read_choice() == "5"
    with pytest.raises(EOFError):
        console.read_choice()


def test_pause_discards_rest_of_line():
    console, _ = make("ignored words\nnext")
    console.pause()
    assert console.read_token() == "next"


def test_pause_after_token_consumes_newline():
    console, _ = make("Yoga\nkept\n")
    assert console.read_token() == "Yoga"
    console.pause()
    assert console.read_token() == "kept"


def test_pause_at_eof_returns():
    console, _ = make("")
    console.pause()
    with pytest.raises(EOFError):
        console.read_token()


@patch("subprocess.run")
def test_clear_runs_command(run):
    console = Console(io.StringIO("CLT001"), io.StringIO(), ["clear"])
    console.clear()
    assert run.call_count == 1
    assert run.call_args.args[0] == ["clear"]
    assert console.read_token() == "CLT001"


@patch("subprocess.run")
def test_clear_disabled(run):
    console, _ = make("CRS002")
    console.clear()
    assert run.call_count == 0
    assert console.read_token() == "CRS002"


@patch("subprocess.run", side_effect=FileNotFoundError)
def test_clear_missing_command_is_ignored(run):
    console = Console(io.StringIO("x"), io.StringIO(), ["no-such-clear"])
    console.clear()
    assert run.call_count == 1
    assert console.read_token() == "x"