"""Terminal descriptions, their registry, and output helpers."""

from __future__ import annotations

import os
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Protocol

from .params import tparm as _tparm

__all__ = [
    "MODIFIERS_NONE",
    "MODIFIERS_XTERM",
    "Terminfo",
    "TermNotFoundError",
    "add_terminfo",
    "lookup_terminfo",
]

MODIFIERS_NONE = 0
MODIFIERS_XTERM = 1

_RGB_FG = "\x1b[38;2;%p1%d;%p2%d;%p3%dm"
_RGB_BG = "\x1b[48;2;%p1%d;%p2%d;%p3%dm"
_RGB_FGBG = "\x1b[38;2;%p1%d;%p2%d;%p3%d;48;2;%p4%d;%p5%d;%p6%dm"

_XTERM256_FG = "\x1b[%?%p1%{8}%<%t3%p1%d%e%p1%{16}%<%t9%p1%{8}%-%d%e38;5;%p1%d%;m"
_XTERM256_BG = "\x1b[%?%p1%{8}%<%t4%p1%d%e%p1%{16}%<%t10%p1%{8}%-%d%e48;5;%p1%d%;m"
_XTERM256_FGBG = (
    "\x1b[%?%p1%{8}%<%t3%p1%d%e%p1%{16}%<%t9%p1%{8}%-%d%e38;5;%p1%d%;;"
    "%?%p2%{8}%<%t4%p2%d%e%p2%{16}%<%t10%p2%{8}%-%d%e48;5;%p2%d%;m"
)


class TermNotFoundError(LookupError):
    """No suitable terminal entry could be found."""

    def __init__(self, message: str = "terminal entry not found") -> None:
        super().__init__(message)


class _Writer(Protocol):
    def write(self, s: str, /) -> Any: ...


@dataclass(kw_only=True)
class Terminfo:
    """A terminal description; comments give the terminfo capability names."""

    name: str = ""
    aliases: list[str] = field(default_factory=list)
    columns: int = 0  # cols
    lines: int = 0  # lines
    colors: int = 0  # colors
    bell: str = ""  # bel
    clear: str = ""  # clear
    enter_ca: str = ""  # smcup
    exit_ca: str = ""  # rmcup
    show_cursor: str = ""  # cnorm
    hide_cursor: str = ""  # civis
    attr_off: str = ""  # sgr0
    underline: str = ""  # smul
    bold: str = ""  # bold
    blink: str = ""  # blink
    reverse: str = ""  # rev
    dim: str = ""  # dim
    italic: str = ""  # sitm
    enter_keypad: str = ""  # smkx
    exit_keypad: str = ""  # rmkx
    set_fg: str = ""  # setaf
    set_bg: str = ""  # setab
    reset_fg_bg: str = ""  # op
    set_cursor: str = ""  # cup
    cursor_back1: str = ""  # cub1
    cursor_up1: str = ""  # cuu1
    pad_char: str = ""  # pad
    key_backspace: str = ""  # kbs
    key_f1: str = ""
    key_f2: str = ""
    key_f3: str = ""
    key_f4: str = ""
    key_f5: str = ""
    key_f6: str = ""
    key_f7: str = ""
    key_f8: str = ""
    key_f9: str = ""
    key_f10: str = ""
    key_f11: str = ""
    key_f12: str = ""
    key_f13: str = ""
    key_f14: str = ""
    key_f15: str = ""
    key_f16: str = ""
    key_f17: str = ""
    key_f18: str = ""
    key_f19: str = ""
    key_f20: str = ""
    key_f21: str = ""
    key_f22: str = ""
    key_f23: str = ""
    key_f24: str = ""
    key_f25: str = ""
    key_f26: str = ""
    key_f27: str = ""
    key_f28: str = ""
    key_f29: str = ""
    key_f30: str = ""
    key_f31: str = ""
    key_f32: str = ""
    key_f33: str = ""
    key_f34: str = ""
    key_f35: str = ""
    key_f36: str = ""
    key_f37: str = ""
    key_f38: str = ""
    key_f39: str = ""
    key_f40: str = ""
    key_f41: str = ""
    key_f42: str = ""
    key_f43: str = ""
    key_f44: str = ""
    key_f45: str = ""
    key_f46: str = ""
    key_f47: str = ""
    key_f48: str = ""
    key_f49: str = ""
    key_f50: str = ""
    key_f51: str = ""
    key_f52: str = ""
    key_f53: str = ""
    key_f54: str = ""
    key_f55: str = ""
    key_f56: str = ""
    key_f57: str = ""
    key_f58: str = ""
    key_f59: str = ""
    key_f60: str = ""
    key_f61: str = ""
    key_f62: str = ""
    key_f63: str = ""
    key_f64: str = ""
    key_insert: str = ""  # kich1
    key_delete: str = ""  # kdch1
    key_home: str = ""  # khome
    key_end: str = ""  # kend
    key_help: str = ""  # khlp
    key_pg_up: str = ""  # kpp
    key_pg_dn: str = ""  # knp
    key_up: str = ""  # kcuu1
    key_down: str = ""  # kcud1
    key_left: str = ""  # kcub1
    key_right: str = ""  # kcuf1
    key_backtab: str = ""  # kcbt
    key_exit: str = ""  # kext
    key_clear: str = ""  # kclr
    key_print: str = ""  # kprt
    key_cancel: str = ""  # kcan
    mouse: str = ""  # kmous
    alt_chars: str = ""  # acsc
    enter_acs: str = ""  # smacs
    exit_acs: str = ""  # rmacs
    enable_acs: str = ""  # enacs
    key_shf_right: str = ""  # kRIT
    key_shf_left: str = ""  # kLFT
    key_shf_home: str = ""  # kHOM
    key_shf_end: str = ""  # kEND
    key_shf_insert: str = ""  # kIC
    key_shf_delete: str = ""  # kDC

    # Non-standard extensions.
    strike_through: str = ""  # smxx
    set_fg_bg: str = ""
    set_fg_bg_rgb: str = ""
    set_fg_rgb: str = ""
    set_bg_rgb: str = ""
    key_shf_up: str = ""
    key_shf_down: str = ""
    key_shf_pg_up: str = ""
    key_shf_pg_dn: str = ""
    key_ctrl_up: str = ""
    key_ctrl_down: str = ""
    key_ctrl_right: str = ""
    key_ctrl_left: str = ""
    key_meta_up: str = ""
    key_meta_down: str = ""
    key_meta_right: str = ""
    key_meta_left: str = ""
    key_alt_up: str = ""
    key_alt_down: str = ""
    key_alt_right: str = ""
    key_alt_left: str = ""
    key_ctrl_home: str = ""
    key_ctrl_end: str = ""
    key_meta_home: str = ""
    key_meta_end: str = ""
    key_alt_home: str = ""
    key_alt_end: str = ""
    key_alt_shf_up: str = ""
    key_alt_shf_down: str = ""
    key_alt_shf_left: str = ""
    key_alt_shf_right: str = ""
    key_meta_shf_up: str = ""
    key_meta_shf_down: str = ""
    key_meta_shf_left: str = ""
    key_meta_shf_right: str = ""
    key_ctrl_shf_up: str = ""
    key_ctrl_shf_down: str = ""
    key_ctrl_shf_left: str = ""
    key_ctrl_shf_right: str = ""
    key_ctrl_shf_home: str = ""
    key_ctrl_shf_end: str = ""
    key_alt_shf_home: str = ""
    key_alt_shf_end: str = ""
    key_meta_shf_home: str = ""
    key_meta_shf_end: str = ""
    enable_paste: str = ""
    disable_paste: str = ""
    paste_start: str = ""
    paste_end: str = ""
    modifiers: int = MODIFIERS_NONE
    insert_char: str = ""  # ich1
    auto_margin: bool = False
    true_color: bool = False
    cursor_default: str = ""
    cursor_blinking_block: str = ""
    cursor_steady_block: str = ""
    cursor_blinking_underline: str = ""
    cursor_steady_underline: str = ""
    cursor_blinking_bar: str = ""
    cursor_steady_bar: str = ""
    enter_url: str = ""
    exit_url: str = ""
    set_window_size: str = ""

    def tparm(self, s: str, *args: Any) -> str:
        """Evaluate the parameterized string ``s`` with ``args``."""
        return _tparm(s, *args)

    def tputs(self, w: _Writer, s: str) -> None:
        """Write ``s`` to ``w``, turning ``$<delay>`` padding into sleeps."""
        while True:
            beg = s.find("$<")
            if beg < 0:
                w.write(s)
                return
            w.write(s[:beg])
            s = s[beg + 2 :]
            end = s.find(">")
            if end < 0:
                w.write("$<" + s)
                return
            spec, s = s[:end], s[end + 1 :]
            count = 0
            unit = 0.001
            dot = False
            for ch in spec:
                if "0" <= ch <= "9":
                    count = count * 10 + (ord(ch) - ord("0"))
                    if dot:
                        unit /= 10
                elif ch == "." and not dot:
                    dot = True
                else:
                    break
            if self.pad_char:
                time.sleep(unit * count)

    def tgoto(self, col: int, row: int) -> str:
        """Return the string that moves the cursor to ``col``, ``row`` (0-based)."""
        return self.tparm(self.set_cursor, row, col)

    def tcolor(self, fi: int, bi: int) -> str:
        """Return the string selecting colors ``fi`` and ``bi``; -1 leaves one out."""
        if self.colors == 8:
            if 7 < fi < 16:
                fi -= 8
            if 7 < bi < 16:
                bi -= 8
        result = ""
        if 0 <= fi < self.colors:
            result += self.tparm(self.set_fg, fi)
        if 0 <= bi < self.colors:
            result += self.tparm(self.set_bg, bi)
        return result


_registry_lock = threading.Lock()
_terminfos: dict[str, Terminfo] = {}


def add_terminfo(t: Terminfo) -> None:
    """Register ``t`` under its name and each of its aliases."""
    with _registry_lock:
        _terminfos[t.name] = t
        for alias in t.aliases:
            _terminfos[alias] = t


def _lookup_first(base: str, suffixes: tuple[str, ...]) -> Terminfo | None:
    for suffix in suffixes:
        try:
            return lookup_terminfo(base + suffix)
        except TermNotFoundError:
            continue
    return None


def lookup_terminfo(name: str) -> Terminfo:
    """Find the entry for the terminal type ``name``."""
    if not name:
        raise TermNotFoundError()

    add_truecolor = os.environ.get("COLORTERM", "") in ("truecolor", "24bit", "24-bit")
    add_256color = False

    with _registry_lock:
        t = _terminfos.get(name)

    if t is not None and t.true_color:
        add_truecolor = True
    elif t is None and name.endswith("-truecolor"):
        base = name[: -len("-truecolor")]
        t = _lookup_first(base, ("-256color", "-88color", "-color", ""))
        if t is not None:
            add_truecolor = True

    if t is None and name.endswith("-256color"):
        base = name[: -len("-256color")]
        t = _lookup_first(base, ("-88color", "-color"))
        if t is not None:
            add_256color = True

    if t is None:
        raise TermNotFoundError()

    override = os.environ.get("TCELL_TRUECOLOR", "")
    if override == "disable":
        add_truecolor = False
    elif override:
        add_truecolor = True

    if add_truecolor and not (t.set_fg_bg_rgb or t.set_fg_rgb or t.set_bg_rgb):
        t.set_fg_rgb = _RGB_FG
        t.set_bg_rgb = _RGB_BG
        t.set_fg_bg_rgb = _RGB_FGBG

    if add_256color:
        t.colors = 256
        t.set_fg = _XTERM256_FG
        t.set_bg = _XTERM256_BG
        t.set_fg_bg = _XTERM256_FGBG
        t.reset_fg_bg = "\x1b[39;49m"
    return t