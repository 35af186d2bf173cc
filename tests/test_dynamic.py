import subprocess
import sys
from unittest import mock

import pytest

from terminfodb.dynamic import (
    NotAddressableError,
    build_terminfo,
    load_dynamic_terminfo,
    load_terminfo,
    parse_infocmp,
    unescape,
)
from terminfodb.terminfo import TermNotFoundError

SAMPLE = (
    "#\tReading in terminfo entry\n"
    "testterm|tt|Test Terminal,\n"
    "\tam,\n"
    "\tTc,\n"
    "\tcolors#8,\n"
    "\tcols#80,\n"
    "\tlines#0x18,\n"
    "\tcup=\\E[%i%p1%d;%p2%dH,\n"
    "\tsetaf=\\E[3%p1%dm,\n"
    "\tsetab=\\E[4%p1%dm,\n"
    "\tkRIT=\\E[1;2C,\n"
    "\tkLFT=\\E[1;2D,\n"
    "\tkHOM=\\E[1;2H,\n"
    "\tkEND=\\E[1;2F,\n"
    "\tbel=^G,\n"
)


def _completed(stdout, returncode=0):
    return subprocess.CompletedProcess(["infocmp"], returncode, stdout=stdout)


def test_unescape_escape_and_control():
    assert unescape("\\E[H") == "\x1b[H"
    assert unescape("\\e") == "\x1b"
    assert unescape("^G") == "\a"
    assert unescape("^[") == "\x1b"


def test_unescape_octal_and_specials():
    assert unescape("\\101") == "A"
    assert unescape("\\0") == "\0"
    assert unescape("\\s") == " "
    assert unescape("\\,") == ","
    assert unescape("\\n\\r\\t\\b\\f") == "\n\r\t\b\f"


def test_unescape_plain_text_unchanged():
    assert unescape("plain text") == "plain text"


def test_parse_infocmp_header_and_caps():
    caps = parse_infocmp(SAMPLE)
    assert caps.name == "testterm"
    assert caps.aliases == ["tt"]
    assert caps.desc == "Test Terminal"
    assert caps.bools["am"] is True
    assert caps.nums["colors"] == 8
    assert caps.nums["lines"] == 24
    assert caps.strs["cup"] == "\x1b[%i%p1%d;%p2%dH"
    assert caps.strs["bel"] == "\a"


def test_parse_infocmp_leading_zero_is_octal():
    caps = parse_infocmp("x|desc,\n\tcols#010,\n")
    assert caps.nums["cols"] == 8


def test_parse_infocmp_malformed_line():
    with pytest.raises(ValueError, match="malformed infocmp"):
        parse_infocmp("x|desc,\n  am\n")


def test_parse_infocmp_bad_number():
    with pytest.raises(ValueError):
        parse_infocmp("x|desc,\n\tcols#-1,\n")


def test_build_terminfo_fields():
    t, desc = build_terminfo("testterm", parse_infocmp(SAMPLE))
    assert desc == "Test Terminal"
    assert t.name == "testterm"
    assert t.aliases == ["tt"]
    assert t.colors == 8
    assert t.columns == 80
    assert t.set_cursor == "\x1b[%i%p1%d;%p2%dH"
    assert t.true_color is True
    assert t.pad_char == "\0"
    assert t.set_fg_bg == "\x1b[3%p1%d;4%p2%dm"
    assert t.tgoto(7, 9) == "\x1b[10;8H"


def test_build_terminfo_xterm_modifier_keys():
    t, _ = build_terminfo("testterm", parse_infocmp(SAMPLE))
    assert t.key_shf_up == "\x1b[1;2A"
    assert t.key_ctrl_left == "\x1b[1;5D"
    assert t.key_shf_pg_dn == "\x1b[6;2~"
    assert t.key_ctrl_home == "\x1b[1;5H"
    assert t.key_meta_shf_end == "\x1b[1;10F"


def test_build_terminfo_rxvt_keys():
    text = (
        "rx|rxvt like,\n"
        "\tcup=\\E[%i%p1%d;%p2%dH,\n"
        "\tkRIT=\\E[c,\n\tkLFT=\\E[d,\n"
        "\tkHOM=\\E[7$,\n\tkEND=\\E[8$,\n"
    )
    t, _ = build_terminfo("rx", parse_infocmp(text))
    assert t.key_shf_up == "\x1b[a"
    assert t.key_ctrl_right == "\x1b[Oc"
    assert t.key_ctrl_home == "\x1b[7^"
    assert t.key_ctrl_end == "\x1b[8^"


def test_build_terminfo_alias_record():
    t, desc = build_terminfo("other", parse_infocmp(SAMPLE))
    assert t.name == "testterm"
    assert desc == ""
    assert t.set_cursor == ""


def test_build_terminfo_not_addressable():
    with pytest.raises(NotAddressableError):
        build_terminfo("dumb", parse_infocmp("dumb|80-column dumb tty,\n\tam,\n"))


def test_build_terminfo_colors_need_setaf():
    text = "c|colors without setaf,\n\tcolors#256,\n\tcup=\\E[%p1%d;%p2%dH,\n"
    t, _ = build_terminfo("c", parse_infocmp(text))
    assert t.colors == 0
    assert t.set_fg_bg == ""


def test_build_terminfo_npc_means_no_pad():
    text = "n|no pad,\n\tnpc,\n\tcup=\\E[%p1%d;%p2%dH,\n"
    t, _ = build_terminfo("n", parse_infocmp(text))
    assert t.pad_char == ""


def test_build_terminfo_rgb_flag_sets_direct_colors():
    text = "d|direct,\n\tRGB,\n\tcolors#0x1000000,\n\tcup=\\E[%p1%d;%p2%dH,\n"
    t, _ = build_terminfo("d", parse_infocmp(text))
    assert t.true_color is True
    assert t.tparm(t.set_fg, 200) == "\x1b[38;5;200m"
    assert t.tparm(t.set_bg, 15) == "\x1b[107m"


def test_load_terminfo_runs_infocmp():
    with mock.patch("subprocess.run", return_value=_completed(SAMPLE.encode())) as run:
        t, desc = load_terminfo("testterm")
    assert run.call_args.args[0] == ["infocmp", "-1", "testterm"]
    assert t.name == "testterm"
    assert desc == "Test Terminal"


def test_load_terminfo_failure_raises():
    with mock.patch("subprocess.run", return_value=_completed(b"", returncode=1)):
        with pytest.raises(subprocess.CalledProcessError):
            load_terminfo("missing")


def test_load_terminfo_missing_program():
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("infocmp")):
        with pytest.raises(FileNotFoundError):
            load_terminfo("testterm")


def test_load_dynamic_terminfo_returns_entry(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    with mock.patch("subprocess.run", return_value=_completed(SAMPLE.encode())):
        t = load_dynamic_terminfo("testterm")
    assert t.name == "testterm"
    assert t.columns == 80


def test_load_dynamic_terminfo_unsupported_platform(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    with pytest.raises(TermNotFoundError, match="terminal type unsupported"):
        load_dynamic_terminfo("xterm")