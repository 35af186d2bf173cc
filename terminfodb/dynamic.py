"""Terminal descriptions built at run time from the output of ``infocmp``."""

from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass, field
from typing import Any

from .terminfo import Terminfo, TermNotFoundError

__all__ = [
    "NotAddressableError",
    "unescape",
    "parse_infocmp",
    "build_terminfo",
    "load_terminfo",
    "load_dynamic_terminfo",
]

_UNSUPPORTED_PLATFORMS = ("win32", "cygwin", "emscripten", "wasi", "android", "zos")

_NUMS = {"colors": "colors", "columns": "cols", "lines": "lines"}

_STRS = {
    "bell": "bel",
    "clear": "clear",
    "enter_ca": "smcup",
    "exit_ca": "rmcup",
    "show_cursor": "cnorm",
    "hide_cursor": "civis",
    "attr_off": "sgr0",
    "underline": "smul",
    "bold": "bold",
    "blink": "blink",
    "dim": "dim",
    "italic": "sitm",
    "reverse": "rev",
    "enter_keypad": "smkx",
    "exit_keypad": "rmkx",
    "set_fg": "setaf",
    "set_bg": "setab",
    "set_cursor": "cup",
    "cursor_back1": "cub1",
    "cursor_up1": "cuu1",
    **{f"key_f{n}": f"kf{n}" for n in range(1, 65)},
    "key_insert": "kich1",
    "key_delete": "kdch1",
    "key_backspace": "kbs",
    "key_home": "khome",
    "key_end": "kend",
    "key_up": "kcuu1",
    "key_down": "kcud1",
    "key_right": "kcuf1",
    "key_left": "kcub1",
    "key_pg_dn": "knp",
    "key_pg_up": "kpp",
    "key_backtab": "kcbt",
    "key_exit": "kext",
    "key_cancel": "kcan",
    "key_print": "kprt",
    "key_help": "khlp",
    "key_clear": "kclr",
    "alt_chars": "acsc",
    "enter_acs": "smacs",
    "exit_acs": "rmacs",
    "enable_acs": "enacs",
    "mouse": "kmous",
    "key_shf_right": "kRIT",
    "key_shf_left": "kLFT",
    "key_shf_home": "kHOM",
    "key_shf_end": "kEND",
}

_XTERM_ARROWS = {
    "key_shf_up": "\x1b[1;2A",
    "key_shf_down": "\x1b[1;2B",
    "key_meta_up": "\x1b[1;9A",
    "key_meta_down": "\x1b[1;9B",
    "key_meta_right": "\x1b[1;9C",
    "key_meta_left": "\x1b[1;9D",
    "key_alt_up": "\x1b[1;3A",
    "key_alt_down": "\x1b[1;3B",
    "key_alt_right": "\x1b[1;3C",
    "key_alt_left": "\x1b[1;3D",
    "key_ctrl_up": "\x1b[1;5A",
    "key_ctrl_down": "\x1b[1;5B",
    "key_ctrl_right": "\x1b[1;5C",
    "key_ctrl_left": "\x1b[1;5D",
    "key_alt_shf_up": "\x1b[1;4A",
    "key_alt_shf_down": "\x1b[1;4B",
    "key_alt_shf_right": "\x1b[1;4C",
    "key_alt_shf_left": "\x1b[1;4D",
    "key_meta_shf_up": "\x1b[1;10A",
    "key_meta_shf_down": "\x1b[1;10B",
    "key_meta_shf_right": "\x1b[1;10C",
    "key_meta_shf_left": "\x1b[1;10D",
    "key_ctrl_shf_up": "\x1b[1;6A",
    "key_ctrl_shf_down": "\x1b[1;6B",
    "key_ctrl_shf_right": "\x1b[1;6C",
    "key_ctrl_shf_left": "\x1b[1;6D",
    "key_shf_pg_up": "\x1b[5;2~",
    "key_shf_pg_dn": "\x1b[6;2~",
}

_XTERM_HOME_END = {
    "key_ctrl_home": "\x1b[1;5H",
    "key_ctrl_end": "\x1b[1;5F",
    "key_alt_home": "\x1b[1;9H",
    "key_alt_end": "\x1b[1;9F",
    "key_ctrl_shf_home": "\x1b[1;6H",
    "key_ctrl_shf_end": "\x1b[1;6F",
    "key_alt_shf_home": "\x1b[1;4H",
    "key_alt_shf_end": "\x1b[1;4F",
    "key_meta_shf_home": "\x1b[1;10H",
    "key_meta_shf_end": "\x1b[1;10F",
}

_RXVT_ARROWS = {
    "key_shf_up": "\x1b[a",
    "key_shf_down": "\x1b[b",
    "key_ctrl_up": "\x1b[Oa",
    "key_ctrl_down": "\x1b[Ob",
    "key_ctrl_right": "\x1b[Oc",
    "key_ctrl_left": "\x1b[Od",
}

_RXVT_HOME_END = {"key_ctrl_home": "\x1b[7^", "key_ctrl_end": "\x1b[8^"}

_DIRECT_BG = "\x1b[%?%p1%{8}%<%t4%p1%d%e%p1%{16}%<%t10%p1%{8}%-%d%e48;5;%p1%d%;m"
_DIRECT_FG = "\x1b[%?%p1%{8}%<%t3%p1%d%e%p1%{16}%<%t9%p1%{8}%-%d%e38;5;%p1%d%;m"

_SIMPLE_ESCAPES = {
    "E": "\x1b",
    "e": "\x1b",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "s": " ",
}


class NotAddressableError(Exception):
    """The terminal lacks absolute cursor addressing."""

    def __init__(self, message: str = "terminal not cursor addressable") -> None:
        super().__init__(message)


@dataclass
class _TermCaps:
    """Capabilities as listed by ``infocmp``."""

    name: str = ""
    desc: str = ""
    aliases: list[str] = field(default_factory=list)
    bools: dict[str, bool] = field(default_factory=dict)
    nums: dict[str, int] = field(default_factory=dict)
    strs: dict[str, str] = field(default_factory=dict)


def _is_octal(ch: str) -> bool:
    return "0" <= ch <= "7"


def unescape(s: str) -> str:
    """Decode the ``\\E``, ``^X`` and octal escapes used by ``infocmp``."""
    out: list[str] = []
    i = 0
    n = len(s)
    while i < n:
        c = s[i]
        if c == "^" and i + 1 < n:
            out.append(chr(ord(s[i + 1]) ^ 0x40))
            i += 2
            continue
        if c == "^":
            break
        if c != "\\":
            out.append(c)
            i += 1
            continue
        if i + 1 >= n:
            break
        c = s[i + 1]
        i += 2
        if c in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[c])
        elif _is_octal(c):
            if i + 1 < n and _is_octal(s[i]) and _is_octal(s[i + 1]):
                value = (int(c) * 64 + int(s[i]) * 8 + int(s[i + 1])) & 0xFF
                out.append(chr(value))
                i += 2
            elif c == "0":
                out.append("\0")
        else:
            out.append(c)
    return "".join(out)


def _parse_uint(text: str) -> int:
    if not text or not text[0].isdigit():
        raise ValueError(f"invalid number: {text!r}")
    body = text.replace("_", "")
    if len(body) > 1 and body[0] == "0" and body[1].isdigit():
        return int(body[1:], 8)
    return int(body, 0)


def parse_infocmp(text: str) -> _TermCaps:
    """Parse the one-capability-per-line output of ``infocmp -1``."""
    lines = text.split("\n")
    while lines and lines[0].startswith("#"):
        lines.pop(0)
    if lines and lines[-1] == "":
        lines.pop()
    if not lines:
        raise ValueError("empty infocmp output")

    caps = _TermCaps()
    header = lines[0]
    if header.endswith(","):
        header = header[:-1]
    names = header.split("|")
    caps.name = names[0]
    rest = names[1:]
    if rest:
        caps.desc = rest.pop()
    caps.aliases = rest

    for line in lines[1:]:
        if not line.startswith("\t") or not line.endswith(","):
            raise ValueError("malformed infocmp: " + line)
        val = line[1:-1]
        if "=" in val:
            key, value = val.split("=", 1)
            caps.strs[key] = unescape(value)
        elif "#" in val:
            key, value = val.split("#", 1)
            caps.nums[key] = _parse_uint(value)
        else:
            caps.bools[val] = True
    return caps


def build_terminfo(name: str, caps: _TermCaps) -> tuple[Terminfo, str]:
    """Turn parsed capabilities into a :class:`Terminfo` and its description."""
    if caps.name != name:
        return Terminfo(name=caps.name), ""

    fields: dict[str, Any] = {"name": caps.name, "aliases": list(caps.aliases)}
    fields.update({attr: caps.nums.get(cap, 0) for attr, cap in _NUMS.items()})
    fields.update({attr: caps.strs.get(cap, "") for attr, cap in _STRS.items()})

    shf_right, shf_left = fields["key_shf_right"], fields["key_shf_left"]
    shf_home, shf_end = fields["key_shf_home"], fields["key_shf_end"]
    if shf_right == "\x1b[1;2C" and shf_left == "\x1b[1;2D":
        fields.update(_XTERM_ARROWS)
    if shf_home == "\x1b[1;2H" and shf_end == "\x1b[1;2F":
        fields.update(_XTERM_HOME_END)
    if shf_right == "\x1b[c" and shf_left == "\x1b[d":
        fields.update(_RXVT_ARROWS)
    if shf_home == "\x1b[7$" and shf_end == "\x1b[8$":
        fields.update(_RXVT_HOME_END)

    if caps.bools.get("Tc"):
        fields["true_color"] = True
    elif caps.bools.get("RGB"):
        fields["true_color"] = True
        fields["set_bg"] = _DIRECT_BG
        fields["set_fg"] = _DIRECT_FG

    if fields["colors"] < 8 or not fields["set_fg"]:
        fields["colors"] = 0
    if not fields["set_cursor"]:
        raise NotAddressableError()

    pad = caps.strs.get("pad", "")
    if not pad and not caps.bools.get("npc"):
        pad = "\0"
    fields["pad_char"] = pad

    set_fg, set_bg = fields["set_fg"], fields["set_bg"]
    if (
        set_fg.startswith("\x1b[")
        and set_bg.startswith("\x1b[")
        and set_fg.endswith("m")
        and set_bg.endswith("m")
    ):
        fields["set_fg_bg"] = set_fg[:-1] + ";" + set_bg[2:].replace("%p1", "%p2")

    return Terminfo(**fields), caps.desc


def load_terminfo(name: str) -> tuple[Terminfo, str]:
    """Describe terminal ``name`` by running ``infocmp``; return entry and description."""
    proc = subprocess.run(
        ["infocmp", "-1", name],
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
    )
    proc.check_returncode()
    text = proc.stdout.decode("utf-8", errors="surrogateescape")
    return build_terminfo(name, parse_infocmp(text))


def load_dynamic_terminfo(term: str) -> Terminfo:
    """Load ``term`` through ``infocmp`` where the platform supports it."""
    if sys.platform.startswith(_UNSUPPORTED_PLATFORMS):
        raise TermNotFoundError("terminal type unsupported")
    t, _ = load_terminfo(term)
    return t