import subprocess

import pytest

from packages.core.monitor import commands
from packages.core.monitor.title_reader import (
    TitleQueryError,
    XpropTitleReader,
    parse_property_value,
)


@pytest.mark.parametrize(
    "output, expected",
    [
        ('WM_NAME = "Example Title"', "Example Title"),
        ('WM_NAME(UTF8_STRING) =  "  spaced  "', "spaced"),
        ("WM_NAME:  not found.", ""),
        ("", ""),
        ("WM_NAME = bare value", "bare value"),
        ('WM_NAME(STRING) = "a = b"', "a = b"),
        ('WM_NAME = ""', ""),
        ('WM_NAME = "Song - Artist  feat. X"', "Song - Artist  feat. X"),
    ],
)
def test_parse_property_value(output, expected):
    assert parse_property_value(output) == expected


def test_parse_strips_only_one_layer_of_quotes():
    assert parse_property_value('WM_NAME = ""nested""') == '"nested"'


def _completed(returncode=0, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


def test_read_runs_xprop_and_parses(monkeypatch):
    calls = []

    def fake_run(argv, **kwargs):
        calls.append(argv)
        return _completed(stdout='WM_NAME(UTF8_STRING) = "晴天 - 周杰伦"\n'.encode("utf-8"))

    monkeypatch.setattr(commands.subprocess, "run", fake_run)

    assert XpropTitleReader().read("0x3a00007") == "晴天 - 周杰伦"
    assert calls == [["xprop", "-id", "0x3a00007", "WM_NAME"]]


def test_read_decodes_invalid_utf8_lossily(monkeypatch):
    monkeypatch.setattr(
        commands.subprocess, "run", lambda argv, **kw: _completed(stdout=b'WM_NAME = "bad \xff byte"')
    )

    assert XpropTitleReader().read("1") == "bad \ufffd byte"


def test_read_raises_on_non_zero_exit(monkeypatch):
    monkeypatch.setattr(
        commands.subprocess, "run", lambda argv, **kw: _completed(returncode=1, stderr=b"BadWindow")
    )

    with pytest.raises(TitleQueryError, match="BadWindow"):
        XpropTitleReader().read("42")


def test_read_raises_when_xprop_missing(monkeypatch):
    def fake_run(argv, **kwargs):
        raise FileNotFoundError(argv[0])

    monkeypatch.setattr(commands.subprocess, "run", fake_run)

    with pytest.raises(TitleQueryError, match="not found"):
        XpropTitleReader().read("42")
