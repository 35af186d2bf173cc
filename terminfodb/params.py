"""Evaluation of parameterized terminfo capability strings."""

from __future__ import annotations

import re
import threading
from typing import Any

__all__ = ["tparm"]

_MAX_PARAMS = 9
_INT_RE = re.compile(r"[+-]?[0-9]+")
_WIDTH_RE = re.compile(r"%[-+# 0]*([0-9]+)")

# Static variables (%PA .. %PZ) persist between evaluations.
_static_vars: list[str] = [""] * 26
_lock = threading.Lock()


def _to_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    return ""


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_RE.fullmatch(value):
        return int(value)
    return 0


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return value not in ("", "false")
    return False


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _format_value(spec: str, value: Any) -> str:
    """Apply a printf-style conversion, as terminals expect it."""
    try:
        result = spec % value
    except (TypeError, ValueError):
        return ""
    if spec.endswith("o") and "#" in spec:
        # Alternate octal form is a single leading zero, not "0o".
        result = result.replace("0o", "0", 1)
        width = _WIDTH_RE.match(spec)
        if width:
            size = int(width.group(1))
            if "-" in spec[: width.start(1)]:
                result = result.ljust(size)
            else:
                result = result.rjust(size)
    return result


class _Expansion:
    """One evaluation of a capability string against its parameters."""

    def __init__(self, source: str, params: list[Any]) -> None:
        self._src = source
        self._pos = 0
        self._out: list[str] = []
        self._stack: list[Any] = []
        self._dvars: list[str] = [""] * 26
        self._params = params

    def _next(self) -> str | None:
        if self._pos >= len(self._src):
            return None
        ch = self._src[self._pos]
        self._pos += 1
        return ch

    def _next_or_nul(self) -> str:
        ch = self._next()
        return "\0" if ch is None else ch

    def _push(self, value: Any) -> None:
        self._stack.append(value)

    def _pop(self) -> Any:
        return self._stack.pop() if self._stack else None

    def _pop_string(self) -> str:
        return _to_string(self._pop()) if self._stack else ""

    def _pop_int(self) -> int:
        return _to_int(self._pop()) if self._stack else 0

    def _pop_bool(self) -> bool:
        return _to_bool(self._pop()) if self._stack else False

    def _pop_pair(self) -> tuple[int, int]:
        b = self._pop_int()
        a = self._pop_int()
        return a, b

    def run(self) -> str:
        while True:
            ch = self._next()
            if ch is None:
                break
            if ch != "%":
                self._out.append(ch)
                continue
            ch = self._next()
            if ch is None:
                break
            self._operation(ch)
        return "".join(self._out)

    def _operation(self, ch: str) -> None:
        if ch == "%":
            self._out.append("%")
        elif ch == "i":
            for idx in (0, 1):
                value = self._params[idx]
                if isinstance(value, int) and not isinstance(value, bool):
                    self._params[idx] = value + 1
        elif ch in "cs":
            self._out.append(self._pop_string())
        elif ch == "d":
            self._out.append(str(self._pop_int()))
        elif ch in "01234xXo:":
            self._formatted(ch)
        elif ch == "p":
            idx = ord(self._next_or_nul()) - ord("1")
            self._push(self._params[idx] if 0 <= idx < _MAX_PARAMS else 0)
        elif ch == "P":
            name = self._next_or_nul()
            if "A" <= name <= "Z":
                _static_vars[ord(name) - ord("A")] = self._pop_string()
            elif "a" <= name <= "z":
                self._dvars[ord(name) - ord("a")] = self._pop_string()
        elif ch == "g":
            name = self._next_or_nul()
            if "A" <= name <= "Z":
                self._push(_static_vars[ord(name) - ord("A")])
            elif "a" <= name <= "z":
                self._push(self._dvars[ord(name) - ord("a")])
        elif ch == "'":
            literal = self._next_or_nul()
            self._next()
            self._push(literal)
        elif ch == "{":
            number = 0
            digit = self._next_or_nul()
            while "0" <= digit <= "9":
                number = number * 10 + int(digit)
                digit = self._next_or_nul()
            self._push(number)
        elif ch == "l":
            self._push(len(self._pop_string()))
        elif ch in "+-*/m&|^<>":
            self._binary(ch)
        elif ch == "~":
            self._push(self._pop_int() ^ -1)
        elif ch == "!":
            self._push(self._pop_int() != 0)
        elif ch == "=":
            b = self._pop_string()
            a = self._pop_string()
            self._push(a == b)
        elif ch == "t":
            if not self._pop_bool():
                self._skip(stop_at_else=True)
        elif ch == "e":
            self._skip(stop_at_else=False)
        # "?" and ";" need no action; unknown operators are ignored.

    def _binary(self, op: str) -> None:
        a, b = self._pop_pair()
        if op == "+":
            self._push(a + b)
        elif op == "-":
            self._push(a - b)
        elif op == "*":
            self._push(a * b)
        elif op == "/":
            self._push(_trunc_div(a, b) if b else 0)
        elif op == "m":
            self._push(a - b * _trunc_div(a, b) if b else 0)
        elif op == "&":
            self._push(a & b)
        elif op == "|":
            self._push(a | b)
        elif op == "^":
            self._push(a ^ b)
        elif op == ">":
            self._push(a > b)
        elif op == "<":
            self._push(a < b)

    def _formatted(self, ch: str) -> None:
        spec = "%"
        if ch == ":":
            ch = self._next_or_nul()
        spec += ch
        while ch in ("+", "-", "#", " "):
            ch = self._next_or_nul()
            spec += ch
        while "0" <= ch <= "9" or ch == ".":
            ch = self._next_or_nul()
            spec += ch
        if ch in ("d", "x", "X", "o"):
            self._out.append(_format_value(spec, self._pop_int()))
        elif ch in ("c", "s"):
            self._out.append(_format_value(spec[:-1] + "s", self._pop_string()))

    def _skip(self, stop_at_else: bool) -> None:
        nest = 0
        while True:
            ch = self._next()
            if ch is None:
                return
            if ch != "%":
                continue
            ch = self._next_or_nul()
            if ch == ";":
                if nest == 0:
                    return
                nest -= 1
            elif ch == "?":
                nest += 1
            elif ch == "e" and stop_at_else and nest == 0:
                return


def tparm(s: str, *args: Any) -> str:
    """Expand the parameterized capability ``s`` with up to nine arguments."""
    params: list[Any] = list(args[:_MAX_PARAMS])
    params.extend([None] * (_MAX_PARAMS - len(params)))
    with _lock:
        return _Expansion(s, params).run()