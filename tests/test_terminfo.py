import io
import time

import pytest

from terminfodb.terminfo import (
    Terminfo,
    TermNotFoundError,
    add_terminfo,
    lookup_terminfo,
)
from terminfodb.terms_base import ANSI8_COLORS, XTERM256_COLORS


def make_test_terminfo() -> Terminfo:
    return Terminfo(
        name="simulation_test",
        columns=80,
        lines=24,
        bell="\a",
        blink="\x1b2ms$<20>something",
        reverse="\x1b[7m",
        alt_chars="``aaffggiijjkkllmmnnooppqqrrssttuuvvwwxxyyzz{{||}}~~",
        mouse="\x1b[M",
        set_cursor="\x1b[%i%p1%d;%p2%dH",
        pad_char="\x00",
        enter_url="\x1b]8;;%p1%s\x1b\\",
        **XTERM256_COLORS,
    )


@pytest.fixture
def eight():
    return Terminfo(name="eight", **ANSI8_COLORS)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("COLORTERM", "TCELL_TRUECOLOR"):
        monkeypatch.delenv(var, raising=False)


def test_tgoto_expansion():
    assert make_test_terminfo().tgoto(7, 9) == "\x1b[10;8H"


def test_tparm_formatted():
    assert make_test_terminfo().tparm("A[%p1%2.2X]B", 47) == "A[2F]B"


@pytest.mark.parametrize(
    "color, expected",
    [(7, "\x1b[37m"), (15, "\x1b[97m"), (200, "\x1b[38;5;200m")],
)
def test_set_fg_colors(color, expected):
    ti = make_test_terminfo()
    assert ti.tparm(ti.set_fg, color) == expected


def test_string_parameter():
    ti = make_test_terminfo()
    result = ti.tparm(ti.enter_url, "https://example.org/test")
    assert result == "\x1b]8;;https://example.org/test\x1b\\"


def _timed_tputs(ti: Terminfo, s: str) -> tuple[str, float]:
    buf = io.StringIO()
    start = time.monotonic()
    ti.tputs(buf, s)
    return buf.getvalue(), time.monotonic() - start


def test_tputs_delay():
    ti = make_test_terminfo()
    out, elapsed = _timed_tputs(ti, ti.blink)
    assert out == "\x1b2mssomething"
    assert 0.02 <= elapsed < 0.5


def test_tputs_without_pad_char_does_not_sleep():
    out, elapsed = _timed_tputs(Terminfo(name="nopad"), "a$<1000>b")
    assert out == "ab"
    assert elapsed < 0.5


def test_tputs_unterminated_padding_is_kept():
    out, _ = _timed_tputs(make_test_terminfo(), "abc$<5")
    assert out == "abc$<5"


def test_tcolor_eight_colors_maps_bright(eight):
    assert eight.tcolor(9, 10) == "\x1b[31m\x1b[42m"


@pytest.mark.parametrize(
    "fg, bg, expected",
    [(-1, 3, "\x1b[43m"), (2, -1, "\x1b[32m"), (-1, -1, "")],
)
def test_tcolor_elides_negative(eight, fg, bg, expected):
    assert eight.tcolor(fg, bg) == expected


def test_tcolor_out_of_range_is_dropped():
    ti = make_test_terminfo()
    assert ti.tcolor(300, 1) == ti.tparm(ti.set_bg, 1)


def test_add_and_lookup_by_name_and_alias():
    t = Terminfo(name="regtest-term", aliases=["regtest-alias"])
    add_terminfo(t)
    assert lookup_terminfo("regtest-term") is t
    assert lookup_terminfo("regtest-alias") is t


@pytest.mark.parametrize("name", ["no-such-terminal-xyz", ""])
def test_lookup_unknown_raises(name):
    with pytest.raises(TermNotFoundError):
        lookup_terminfo(name)


def test_lookup_truecolor_fabricated_from_256color():
    base = Terminfo(name="tctest-256color", colors=256)
    add_terminfo(base)
    t = lookup_terminfo("tctest-truecolor")
    assert t is base
    assert t.set_fg_rgb == "\x1b[38;2;%p1%d;%p2%d;%p3%dm"
    assert t.set_bg_rgb == "\x1b[48;2;%p1%d;%p2%d;%p3%dm"
    assert t.tparm(t.set_fg_rgb, 1, 2, 3) == "\x1b[38;2;1;2;3m"


def test_lookup_256color_fabricated_from_88color():
    add_terminfo(Terminfo(name="c88test-88color", colors=88))
    t = lookup_terminfo("c88test-256color")
    assert t.colors == 256
    assert t.reset_fg_bg == "\x1b[39;49m"
    assert t.tparm(t.set_fg, 123) == "\x1b[38;5;123m"


@pytest.mark.parametrize(
    "env, expected",
    [
        ({"COLORTERM": "truecolor"},
         "\x1b[38;2;%p1%d;%p2%d;%p3%d;48;2;%p4%d;%p5%d;%p6%dm"),
        ({"COLORTERM": "24bit", "TCELL_TRUECOLOR": "disable"}, ""),
        ({}, ""),
    ],
)
def test_environment_controls_rgb(monkeypatch, env, expected):
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    name = "envtest-" + "-".join(sorted(env.values()))
    add_terminfo(Terminfo(name=name))
    assert lookup_terminfo(name).set_fg_bg_rgb == expected