import pytest

from modules.byte_convert.cli import main


def test_base_converts_byte_list(capsys):
    assert main(["base", "-f", "hex", "-t", "bin", "AB", "CD"]) == 0
    assert capsys.readouterr().out == "10101011 11001101\n"


def test_base_defaults_to_decimal(capsys):
    assert main(["base", "28391287459812749"]) == 0
    assert capsys.readouterr().out == "28391287459812749\n"


def test_trim_drops_newline(capsys):
    assert main(["--trim", "base", "-t", "hex", "-u", "255"]) == 0
    assert capsys.readouterr().out == "FF"


def test_ascii_input_joins_tokens(capsys):
    assert main(["base", "-f", "ascii", "-t", "dec", "ab", "c"]) == 0
    assert capsys.readouterr().out == "97 98 99\n"


def test_base_reports_errors(capsys):
    assert main(["base", "-f", "hex", "ABC"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: ")


def test_base_requires_input(capsys):
    assert main(["base", "-t", "hex"]) == 1
    assert "Value is required." in capsys.readouterr().err


def test_unknown_format_is_rejected_by_parser():
    with pytest.raises(SystemExit):
        main(["base", "-f", "octal", "7"])


def test_rnd_formats_output(capsys):
    assert main(["--trim", "rnd", "-f", "b64", "3"]) == 0
    assert len(capsys.readouterr().out) == 4


def test_rnd_uppercase_hex(capsys):
    assert main(["--trim", "rnd", "-u", "4"]) == 0
    out = capsys.readouterr().out
    assert len(out) == 8
    assert out == out.upper()


def test_rnd_rejects_bad_count(capsys):
    assert main(["rnd", "0"]) == 1
    assert "Count must be between" in capsys.readouterr().err
