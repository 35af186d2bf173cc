"""Built-in descriptions for multiplexers, the Linux console, alacritty and st."""

from __future__ import annotations

from typing import Any, Mapping

from .terminfo import MODIFIERS_XTERM, Terminfo, add_terminfo
from .terms_base import (
    ANSI8_COLORS,
    ANSI_ARROWS,
    ANSI_CUP,
    APP_ARROWS,
    EDIT_KEYS,
    XTERM256_COLORS,
    XTERM_FKEYS,
    _build,
    _xterm,
)

__all__ = ["register"]

_MUX_ACS = "++,,--..00``aaffgghhiijjkkllmmnnooppqqrrssttuuvvwwxxyyzz{{||}}~~"
_LINUX_ACS = "++,,--..00__``aaffgghhiijjkkllmmnnooppqqrrssttuuvvwwxxyyzz{{||}c~~"
_ST_ACS = "+C,D-A.B0E``aaffgghFiGjjkkllmmnnooppqqrrssttuuvvwwxxyyzz{{||}}~~"

_SCREEN_COMMON: dict[str, Any] = dict(
    columns=80,
    lines=24,
    bell="\a",
    clear="\x1b[H\x1b[J",
    enter_ca="\x1b[?1049h",
    exit_ca="\x1b[?1049l",
    show_cursor="\x1b[34h\x1b[?25h",
    hide_cursor="\x1b[?25l",
    attr_off="\x1b[m\x0f",
    underline="\x1b[4m",
    bold="\x1b[1m",
    dim="\x1b[2m",
    blink="\x1b[5m",
    reverse="\x1b[7m",
    enter_keypad="\x1b[?1h\x1b=",
    exit_keypad="\x1b[?1l\x1b>",
    reset_fg_bg="\x1b[39;49m",
    pad_char="\x00",
    alt_chars=_MUX_ACS,
    enter_acs="\x0e",
    exit_acs="\x0f",
    enable_acs="\x1b(B\x1b)0",
    mouse="\x1b[M",
    set_cursor=ANSI_CUP,
    cursor_back1="\b",
    cursor_up1="\x1bM",
    key_home="\x1b[1~",
    key_end="\x1b[4~",
    key_backtab="\x1b[Z",
    auto_margin=True,
)


def _screen(name: str, *parts: Mapping[str, Any], **overrides: Any) -> Terminfo:
    return _build(
        ANSI8_COLORS, APP_ARROWS, EDIT_KEYS, XTERM_FKEYS, _SCREEN_COMMON,
        *parts, name=name, **overrides,
    )


def _tmux(name: str, *parts: Mapping[str, Any]) -> Terminfo:
    return _screen(
        name,
        *parts,
        italic="\x1b[3m",
        strike_through="\x1b[9m",
        modifiers=MODIFIERS_XTERM,
    )


def _linux() -> Terminfo:
    console_fkeys = ["\x1b[[A", "\x1b[[B", "\x1b[[C", "\x1b[[D", "\x1b[[E"]
    upper_fkeys = [
        "\x1b[25~", "\x1b[26~", "\x1b[28~", "\x1b[29~",
        "\x1b[31~", "\x1b[32~", "\x1b[33~", "\x1b[34~",
    ]
    return _build(
        ANSI8_COLORS,
        ANSI_ARROWS,
        EDIT_KEYS,
        XTERM_FKEYS,
        {f"key_f{n}": seq for n, seq in enumerate(console_fkeys, start=1)},
        {f"key_f{n}": seq for n, seq in enumerate(upper_fkeys, start=13)},
        name="linux",
        bell="\a",
        clear="\x1b[H\x1b[J",
        show_cursor="\x1b[?25h\x1b[?0c",
        hide_cursor="\x1b[?25l\x1b[?1c",
        attr_off="\x1b[m\x0f",
        underline="\x1b[4m",
        bold="\x1b[1m",
        dim="\x1b[2m",
        blink="\x1b[5m",
        reverse="\x1b[7m",
        reset_fg_bg="\x1b[39;49m",
        pad_char="\x00",
        alt_chars=_LINUX_ACS,
        enter_acs="\x0e",
        exit_acs="\x0f",
        enable_acs="\x1b)0",
        mouse="\x1b[M",
        set_cursor=ANSI_CUP,
        cursor_back1="\b",
        cursor_up1="\x1b[A",
        key_home="\x1b[1~",
        key_end="\x1b[4~",
        key_backtab="\x1b[Z",
        auto_margin=True,
        insert_char="\x1b[@",
    )


def _st(name: str, *parts: Mapping[str, Any]) -> Terminfo:
    return _xterm(
        name,
        *parts,
        enter_ca="\x1b[?1049h",
        exit_ca="\x1b[?1049l",
        attr_off="\x1b[0m",
        alt_chars=_ST_ACS,
        enable_acs="\x1b)0",
        key_home="\x1b[1~",
        key_end="\x1b[4~",
        key_clear="\x1b[3;5~",
        true_color=True,
    )


def register() -> list[Terminfo]:
    """Register screen, tmux, linux, alacritty and st entries and return them."""
    entries = [
        _screen("screen"),
        _screen("screen-256color", XTERM256_COLORS),
        _tmux("tmux"),
        _tmux("tmux-256color", XTERM256_COLORS),
        _linux(),
        _xterm("alacritty", XTERM256_COLORS, mouse="\x1b[<"),
        _st("st"),
        _st("st-256color", XTERM256_COLORS),
    ]
    for entry in entries:
        add_terminfo(entry)
    return entries