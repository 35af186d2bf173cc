"""Built-in descriptions for desktop emulators and a few legacy terminals."""

from __future__ import annotations

from typing import Any

from . import terms_base, terms_mux
from .terminfo import MODIFIERS_XTERM, Terminfo, add_terminfo

__all__ = ["register", "register_all"]

_ANSI_CUP = "\x1b[%i%p1%d;%p2%dH"

_XTERM_ACS = "``aaffggiijjkkllmmnnooppqqrrssttuuvvwwxxyyzz{{||}}~~"
_KITTY_ACS = "++,,--..00``aaffgghhiijjkkllmmnnooppqqrrssttuuvvwwxxyyzz{{||}}~~"

_ANSI8_FG = "\x1b[3%p1%dm"
_ANSI8_BG = "\x1b[4%p1%dm"
_ANSI8_FGBG = "\x1b[3%p1%d;4%p2%dm"

_XTERM256_FG = "\x1b[%?%p1%{8}%<%t3%p1%d%e%p1%{16}%<%t9%p1%{8}%-%d%e38;5;%p1%d%;m"
_XTERM256_BG = "\x1b[%?%p1%{8}%<%t4%p1%d%e%p1%{16}%<%t10%p1%{8}%-%d%e48;5;%p1%d%;m"
_XTERM256_FGBG = (
    "\x1b[%?%p1%{8}%<%t3%p1%d%e%p1%{16}%<%t9%p1%{8}%-%d%e38;5;%p1%d%;;"
    "%?%p2%{8}%<%t4%p2%d%e%p2%{16}%<%t10%p2%{8}%-%d%e48;5;%p2%d%;m"
)

_FOOT_FG = "\x1b[%?%p1%{8}%<%t3%p1%d%e%p1%{16}%<%t9%p1%{8}%-%d%e38:5:%p1%d%;m"
_FOOT_BG = "\x1b[%?%p1%{8}%<%t4%p1%d%e%p1%{16}%<%t10%p1%{8}%-%d%e48:5:%p1%d%;m"
_FOOT_FGBG = (
    "\x1b[%?%p1%{8}%<%t3%p1%d%e%p1%{16}%<%t9%p1%{8}%-%d%e38:5:%p1%d%;;"
    "%?%p2%{8}%<%t4%p2%d%e%p2%{16}%<%t10%p2%{8}%-%d%e48:5:%p2%d%;m"
)

_ANSI8_COLORS: dict[str, Any] = dict(
    colors=8, set_fg=_ANSI8_FG, set_bg=_ANSI8_BG, set_fg_bg=_ANSI8_FGBG
)
_COLORS_256: dict[str, Any] = dict(
    colors=256, set_fg=_XTERM256_FG, set_bg=_XTERM256_BG, set_fg_bg=_XTERM256_FGBG
)

# Keys and capabilities common to the VTE/KDE/kitty/foot family.
_XTERM_LIKE: dict[str, Any] = dict(
    columns=80,
    lines=24,
    clear="\x1b[H\x1b[2J",
    hide_cursor="\x1b[?25l",
    underline="\x1b[4m",
    bold="\x1b[1m",
    dim="\x1b[2m",
    italic="\x1b[3m",
    reverse="\x1b[7m",
    reset_fg_bg="\x1b[39;49m",
    set_cursor=_ANSI_CUP,
    cursor_back1="\b",
    cursor_up1="\x1b[A",
    key_up="\x1bOA",
    key_down="\x1bOB",
    key_right="\x1bOC",
    key_left="\x1bOD",
    key_insert="\x1b[2~",
    key_delete="\x1b[3~",
    key_backspace="\x7f",
    key_home="\x1bOH",
    key_end="\x1bOF",
    key_pg_up="\x1b[5~",
    key_pg_dn="\x1b[6~",
    key_f1="\x1bOP",
    key_f2="\x1bOQ",
    key_f3="\x1bOR",
    key_f4="\x1bOS",
    key_f5="\x1b[15~",
    key_f6="\x1b[17~",
    key_f7="\x1b[18~",
    key_f8="\x1b[19~",
    key_f9="\x1b[20~",
    key_f10="\x1b[21~",
    key_f11="\x1b[23~",
    key_f12="\x1b[24~",
    key_backtab="\x1b[Z",
    modifiers=MODIFIERS_XTERM,
    auto_margin=True,
)


def _xterm_like(name: str, **fields: Any) -> Terminfo:
    merged: dict[str, Any] = dict(_XTERM_LIKE)
    merged.update(fields)
    return Terminfo(name=name, **merged)


def _gnome(name: str, colors: dict[str, Any]) -> Terminfo:
    return _xterm_like(
        name,
        bell="\a",
        enter_ca="\x1b7\x1b[?47h",
        exit_ca="\x1b[2J\x1b[?47l\x1b8",
        show_cursor="\x1b[?25h",
        attr_off="\x1b[0m\x0f",
        enter_keypad="\x1b[?1h\x1b=",
        exit_keypad="\x1b[?1l\x1b>",
        pad_char="\x00",
        alt_chars=_XTERM_ACS,
        enter_acs="\x0e",
        exit_acs="\x0f",
        enable_acs="\x1b)0",
        mouse="\x1b[M",
        **colors,
    )


def _konsole(name: str, colors: dict[str, Any]) -> Terminfo:
    return _xterm_like(
        name,
        enter_ca="\x1b7\x1b[?47h",
        exit_ca="\x1b[2J\x1b[?47l\x1b8",
        show_cursor="\x1b[?25h",
        attr_off="\x1b[0m\x0f",
        blink="\x1b[5m",
        enter_keypad="\x1b[?1h\x1b=",
        exit_keypad="\x1b[?1l\x1b>",
        alt_chars=_XTERM_ACS,
        enter_acs="\x0e",
        exit_acs="\x0f",
        enable_acs="\x1b)0",
        strike_through="\x1b[9m",
        mouse="\x1b[<",
        **colors,
    )


def _kitty() -> Terminfo:
    return _xterm_like(
        "xterm-kitty",
        bell="\a",
        enter_ca="\x1b[?1049h",
        exit_ca="\x1b[?1049l",
        show_cursor="\x1b[?12l\x1b[?25h",
        attr_off="\x1b(B\x1b[m",
        enter_keypad="\x1b[?1h",
        exit_keypad="\x1b[?1l",
        alt_chars=_KITTY_ACS,
        enter_acs="\x1b(0",
        exit_acs="\x1b(B",
        strike_through="\x1b[9m",
        mouse="\x1b[M",
        true_color=True,
        **_COLORS_256,
    )


def _foot() -> Terminfo:
    return _xterm_like(
        "foot",
        aliases=["foot-extra"],
        colors=256,
        bell="\a",
        enter_ca="\x1b[?1049h\x1b[22;0;0t",
        exit_ca="\x1b[?1049l\x1b[23;0;0t",
        show_cursor="\x1b[?12l\x1b[?25h",
        attr_off="\x1b(B\x1b[m",
        blink="\x1b[5m",
        enter_keypad="\x1b[?1h\x1b=",
        exit_keypad="\x1b[?1l\x1b>",
        set_fg=_FOOT_FG,
        set_bg=_FOOT_BG,
        set_fg_bg=_FOOT_FGBG,
        alt_chars=_XTERM_ACS,
        enter_acs="\x1b(0",
        exit_acs="\x1b(B",
        strike_through="\x1b[9m",
        mouse="\x1b[M",
    )


def _vt52() -> Terminfo:
    return Terminfo(
        name="vt52",
        columns=80,
        lines=24,
        bell="\a",
        clear="\x1bH\x1bJ",
        pad_char="\x00",
        alt_chars="+h.k0affggolpnqprrss",
        enter_acs="\x1bF",
        exit_acs="\x1bG",
        set_cursor="\x1bY%p1%' '%+%c%p2%' '%+%c",
        cursor_back1="\x1bD",
        cursor_up1="\x1bA",
        key_up="\x1bA",
        key_down="\x1bB",
        key_right="\x1bC",
        key_left="\x1bD",
        key_backspace="\b",
    )


_SUN_COMMON: dict[str, Any] = dict(
    columns=80,
    lines=34,
    bell="\a",
    clear="\f",
    attr_off="\x1b[m",
    reverse="\x1b[7m",
    pad_char="\x00",
    set_cursor=_ANSI_CUP,
    cursor_back1="\b",
    cursor_up1="\x1b[A",
    key_up="\x1b[A",
    key_down="\x1b[B",
    key_right="\x1b[C",
    key_left="\x1b[D",
    key_insert="\x1b[247z",
    key_delete="\x7f",
    key_backspace="\b",
    key_home="\x1b[214z",
    key_end="\x1b[220z",
    key_pg_up="\x1b[216z",
    key_pg_dn="\x1b[222z",
    **{f"key_f{n}": f"\x1b[{223 + n}z" for n in range(1, 13)},
    auto_margin=True,
    insert_char="\x1b[@",
)


def _sun() -> Terminfo:
    return Terminfo(name="sun", aliases=["sun1", "sun2"], **_SUN_COMMON)


def _sun_color() -> Terminfo:
    return Terminfo(
        name="sun-color",
        colors=256,
        bold="\x1b[1m",
        set_fg="\x1b[38;5;%p1%dm",
        set_bg="\x1b[48;5;%p1%dm",
        reset_fg_bg="\x1b[0m",
        **_SUN_COMMON,
    )


def register() -> list[Terminfo]:
    """Register the desktop and legacy terminal entries and return them."""
    entries = [
        _gnome("gnome", _ANSI8_COLORS),
        _gnome("gnome-256color", _COLORS_256),
        _konsole("konsole", _ANSI8_COLORS),
        _konsole("konsole-256color", _COLORS_256),
        _kitty(),
        _foot(),
        _vt52(),
        _sun(),
        _sun_color(),
    ]
    for entry in entries:
        add_terminfo(entry)
    return entries


def register_all() -> list[Terminfo]:
    """Register every built-in entry of the extended set and return them."""
    return terms_base.register() + terms_mux.register() + register()