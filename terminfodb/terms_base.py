"""Built-in descriptions of the most common terminal types."""

from __future__ import annotations

from typing import Any, Mapping

from .terminfo import MODIFIERS_XTERM, Terminfo, add_terminfo

__all__ = ["register"]

ANSI_CUP = "\x1b[%i%p1%d;%p2%dH"

_ANSI_PC_ACS = (
    "+\x10,\x11-\x18.\x190\xdb`\x04a\xb1f\xf8g\xf1h\xb0j\xd9k\xbfl\xdam\xc0n\xc5"
    "o~p\xc4q\xc4r\xc4s_t\xc3u\xb4v\xc1w\xc2x\xb3y\xf3z\xf2{\xe3|\xd8}\x9c~\xfe"
)
DEC_ACS = "``aaffggjjkkllmmnnooppqqrrssttuuvvwwxxyyzz{{||}}~~"
XTERM_ACS = "``aaffggiijjkkllmmnnooppqqrrssttuuvvwwxxyyzz{{||}}~~"

ANSI8_COLORS: dict[str, Any] = dict(
    colors=8,
    set_fg="\x1b[3%p1%dm",
    set_bg="\x1b[4%p1%dm",
    set_fg_bg="\x1b[3%p1%d;4%p2%dm",
)

XTERM256_COLORS: dict[str, Any] = dict(
    colors=256,
    set_fg="\x1b[%?%p1%{8}%<%t3%p1%d%e%p1%{16}%<%t9%p1%{8}%-%d%e38;5;%p1%d%;m",
    set_bg="\x1b[%?%p1%{8}%<%t4%p1%d%e%p1%{16}%<%t10%p1%{8}%-%d%e48;5;%p1%d%;m",
    set_fg_bg=(
        "\x1b[%?%p1%{8}%<%t3%p1%d%e%p1%{16}%<%t9%p1%{8}%-%d%e38;5;%p1%d%;;"
        "%?%p2%{8}%<%t4%p2%d%e%p2%{16}%<%t10%p2%{8}%-%d%e48;5;%p2%d%;m"
    ),
)

ANSI_ARROWS: dict[str, str] = dict(
    key_up="\x1b[A",
    key_down="\x1b[B",
    key_right="\x1b[C",
    key_left="\x1b[D",
)

APP_ARROWS: dict[str, str] = {
    name: "\x1bO" + seq[-1] for name, seq in ANSI_ARROWS.items()
}

EDIT_KEYS: dict[str, str] = dict(
    key_insert="\x1b[2~",
    key_delete="\x1b[3~",
    key_backspace="\x7f",
    key_pg_up="\x1b[5~",
    key_pg_dn="\x1b[6~",
)

XTERM_FKEYS: dict[str, str] = {
    f"key_f{n}": seq
    for n, seq in enumerate(
        [
            "\x1bOP", "\x1bOQ", "\x1bOR", "\x1bOS",
            "\x1b[15~", "\x1b[17~", "\x1b[18~", "\x1b[19~",
            "\x1b[20~", "\x1b[21~", "\x1b[23~", "\x1b[24~",
        ],
        start=1,
    )
}

_XTERM_COMMON: dict[str, Any] = dict(
    columns=80,
    lines=24,
    bell="\a",
    clear="\x1b[H\x1b[2J",
    enter_ca="\x1b[?1049h\x1b[22;0;0t",
    exit_ca="\x1b[?1049l\x1b[23;0;0t",
    show_cursor="\x1b[?12l\x1b[?25h",
    hide_cursor="\x1b[?25l",
    attr_off="\x1b(B\x1b[m",
    underline="\x1b[4m",
    bold="\x1b[1m",
    dim="\x1b[2m",
    italic="\x1b[3m",
    blink="\x1b[5m",
    reverse="\x1b[7m",
    enter_keypad="\x1b[?1h\x1b=",
    exit_keypad="\x1b[?1l\x1b>",
    reset_fg_bg="\x1b[39;49m",
    alt_chars=XTERM_ACS,
    enter_acs="\x1b(0",
    exit_acs="\x1b(B",
    strike_through="\x1b[9m",
    mouse="\x1b[M",
    set_cursor=ANSI_CUP,
    cursor_back1="\b",
    cursor_up1="\x1b[A",
    key_home="\x1bOH",
    key_end="\x1bOF",
    key_backtab="\x1b[Z",
    modifiers=MODIFIERS_XTERM,
    auto_margin=True,
)


def _build(*parts: Mapping[str, Any], **fields: Any) -> Terminfo:
    """Merge capability sets in order, later ones winning, into an entry."""
    merged: dict[str, Any] = {}
    for part in parts:
        merged.update(part)
    merged.update(fields)
    return Terminfo(**merged)


def _xterm(name: str, *parts: Mapping[str, Any], **overrides: Any) -> Terminfo:
    return _build(
        ANSI8_COLORS, APP_ARROWS, EDIT_KEYS, XTERM_FKEYS, _XTERM_COMMON,
        *parts, name=name, **overrides,
    )


def _ansi() -> Terminfo:
    return _build(
        ANSI8_COLORS,
        ANSI_ARROWS,
        name="ansi",
        columns=80,
        lines=24,
        bell="\a",
        clear="\x1b[H\x1b[J",
        attr_off="\x1b[0;10m",
        underline="\x1b[4m",
        bold="\x1b[1m",
        blink="\x1b[5m",
        reverse="\x1b[7m",
        reset_fg_bg="\x1b[39;49m",
        pad_char="\x00",
        alt_chars=_ANSI_PC_ACS,
        enter_acs="\x1b[11m",
        exit_acs="\x1b[10m",
        set_cursor=ANSI_CUP,
        cursor_back1="\x1b[D",
        cursor_up1="\x1b[A",
        key_insert="\x1b[L",
        key_backspace="\b",
        key_home="\x1b[H",
        key_backtab="\x1b[Z",
        auto_margin=True,
    )


def _vt10x(name: str, aliases: list[str]) -> Terminfo:
    fkeys = ["P", "Q", "R", "S", "t", "u", "v", "l", "w", "x"]
    return _build(
        APP_ARROWS,
        {f"key_f{n}": "\x1bO" + c for n, c in enumerate(fkeys, start=1)},
        name=name,
        aliases=aliases,
        columns=80,
        lines=24,
        bell="\a",
        clear="\x1b[H\x1b[J$<50>",
        attr_off="\x1b[m\x0f$<2>",
        underline="\x1b[4m$<2>",
        bold="\x1b[1m$<2>",
        blink="\x1b[5m$<2>",
        reverse="\x1b[7m$<2>",
        enter_keypad="\x1b[?1h\x1b=",
        exit_keypad="\x1b[?1l\x1b>",
        pad_char="\x00",
        alt_chars=DEC_ACS,
        enter_acs="\x0e",
        exit_acs="\x0f",
        enable_acs="\x1b(B\x1b)0",
        set_cursor="\x1b[%i%p1%d;%p2%dH$<5>",
        cursor_back1="\b",
        cursor_up1="\x1b[A$<2>",
        key_backspace="\b",
        auto_margin=True,
    )


def _vt220() -> Terminfo:
    fkeys = {k: v for k, v in XTERM_FKEYS.items() if k != "key_f5"}
    return _build(
        ANSI_ARROWS,
        EDIT_KEYS,
        fkeys,
        name="vt220",
        aliases=["vt200"],
        columns=80,
        lines=24,
        bell="\a",
        clear="\x1b[H\x1b[J",
        attr_off="\x1b[m\x1b(B",
        underline="\x1b[4m",
        bold="\x1b[1m",
        blink="\x1b[5m",
        reverse="\x1b[7m",
        pad_char="\x00",
        alt_chars=DEC_ACS,
        enter_acs="\x1b(0$<2>",
        exit_acs="\x1b(B$<4>",
        enable_acs="\x1b)0",
        set_cursor=ANSI_CUP,
        cursor_back1="\b",
        cursor_up1="\x1b[A",
        key_backspace="\b",
        key_f13="\x1b[25~",
        key_f14="\x1b[26~",
        key_f17="\x1b[31~",
        key_f18="\x1b[32~",
        key_f19="\x1b[33~",
        key_f20="\x1b[34~",
        key_help="\x1b[28~",
        auto_margin=True,
    )


def register() -> list[Terminfo]:
    """Register the base terminal entries and return them."""
    entries = [
        _ansi(),
        _vt10x("vt100", ["vt100-am"]),
        _vt10x("vt102", []),
        _vt220(),
        _xterm("xterm", aliases=["xterm-debian"]),
        _xterm("xterm-88color", XTERM256_COLORS, colors=88),
        _xterm("xterm-256color", XTERM256_COLORS),
        _xterm(
            "xterm-direct",
            XTERM256_COLORS,
            aliases=["xterm-truecolor"],
            set_fg_rgb="\x1b[38;2;%p1%d;%p2%d;%p3%dm",
            set_bg_rgb="\x1b[48;2;%p1%d;%p2%d;%p3%dm",
            set_fg_bg_rgb="\x1b[38;2;%p1%d;%p2%d;%p3%d;48;2;%p4%d;%p5%d;%p6%dm",
            true_color=True,
        ),
    ]
    for entry in entries:
        add_terminfo(entry)
    return entries