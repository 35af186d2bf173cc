import io

import pytest

from terminfodb import terms_desktop
from terminfodb.terminfo import TermNotFoundError, lookup_terminfo


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("COLORTERM", raising=False)
    monkeypatch.delenv("TCELL_TRUECOLOR", raising=False)


def test_register_returns_expected_names():
    names = [t.name for t in terms_desktop.register()]
    assert names == [
        "gnome",
        "gnome-256color",
        "konsole",
        "konsole-256color",
        "xterm-kitty",
        "foot",
        "vt52",
        "sun",
        "sun-color",
    ]


def test_every_entry_is_cursor_addressable():
    for entry in terms_desktop.register():
        assert entry.set_cursor


def test_aliases_resolve_to_same_entry():
    terms_desktop.register()
    assert lookup_terminfo("foot-extra") is lookup_terminfo("foot")
    assert lookup_terminfo("sun1") is lookup_terminfo("sun")
    assert lookup_terminfo("sun2").name == "sun"


def test_gnome_256_color_expansion():
    terms_desktop.register()
    t = lookup_terminfo("gnome-256color")
    assert t.tparm(t.set_fg, 7) == "\x1b[37m"
    assert t.tparm(t.set_fg, 15) == "\x1b[97m"
    assert t.tparm(t.set_fg, 200) == "\x1b[38;5;200m"


def test_foot_uses_colon_separated_colors():
    terms_desktop.register()
    t = lookup_terminfo("foot")
    assert t.tparm(t.set_fg, 200) == "\x1b[38:5:200m"


def test_konsole_tcolor_combines_fg_and_bg():
    terms_desktop.register()
    t = lookup_terminfo("konsole")
    assert t.tcolor(1, 2) == t.tparm(t.set_fg, 1) + t.tparm(t.set_bg, 2)
    # Bright colors fold down to the 8-color range.
    assert t.tcolor(9, -1) == t.tparm(t.set_fg, 1)


def test_kitty_true_color_gains_rgb_sequences():
    terms_desktop.register()
    t = lookup_terminfo("xterm-kitty")
    assert t.true_color is True
    assert t.set_fg_rgb == "\x1b[38;2;%p1%d;%p2%d;%p3%dm"


def test_sun_color_foreground_only():
    terms_desktop.register()
    t = lookup_terminfo("sun-color")
    assert t.tcolor(3, -1) == "\x1b[38;5;3m"
    assert t.set_fg_bg == ""


def test_sun_has_no_colors():
    terms_desktop.register()
    t = lookup_terminfo("sun")
    assert t.colors == 0
    assert t.tcolor(1, 2) == ""


def test_tputs_without_padding_passes_through():
    terms_desktop.register()
    t = lookup_terminfo("gnome")
    buf = io.StringIO()
    t.tputs(buf, t.clear)
    assert buf.getvalue() == t.clear


def test_register_all_includes_every_group():
    names = {t.name for t in terms_desktop.register_all()}
    assert {"xterm", "vt100", "screen", "tmux", "gnome", "foot"} <= names
    assert lookup_terminfo("xterm-debian").name == "xterm"


def test_unknown_terminal_raises():
    terms_desktop.register_all()
    with pytest.raises(TermNotFoundError):
        lookup_terminfo("no-such-terminal-here")