# terminfodb

A small terminal capability database for Python programs that write escape
sequences to the terminal themselves.

It provides:

- `Terminfo` (in `terminfodb.terminfo`), a dataclass holding one terminal's
  capabilities: escape sequences for cursor motion, colours, attributes,
  keys and so on.
- Expansion of parameterised capability strings: `terminfodb.params.tparm`
  and the `Terminfo.tparm`, `Terminfo.tgoto` and `Terminfo.tcolor` methods,
  with `%?...%t...%e...%;` conditionals, arithmetic, variables and
  printf-style formats.
- `Terminfo.tputs`, which writes a capability and turns `$<N>` padding into
  a sleep when the entry has a pad character.
- Built-in entries for ansi, vt100, vt102, vt220, xterm, xterm-88color,
  xterm-256color, xterm-direct, screen, screen-256color, tmux,
  tmux-256color, linux, alacritty, st, st-256color, gnome, gnome-256color,
  konsole, konsole-256color, xterm-kitty, foot, vt52, sun and sun-color
  (plus their aliases), and a registry to look them up by name.
- Loading of other terminals from the output of the system's `infocmp`.
- `StdIoTty`, which puts standard input into raw mode and calls back on
  window size changes.

## Installation

```
pip install terminfodb
```

## Looking up a terminal

The registry starts empty; register the built-in entries first.

```python
import sys

from terminfodb.terms_desktop import register_all
from terminfodb.terminfo import lookup_terminfo, TermNotFoundError

register_all()

try:
    ti = lookup_terminfo("xterm-256color")
except TermNotFoundError:
    raise SystemExit("unknown terminal")

ti.tputs(sys.stdout, ti.clear)
ti.tputs(sys.stdout, ti.tgoto(10, 5))       # column 10, row 5
ti.tputs(sys.stdout, ti.tcolor(1, 4))       # colour 1 on colour 4
sys.stdout.write("hello")
ti.tputs(sys.stdout, ti.attr_off)
```

`terminfodb.terms_base.register()`, `terminfodb.terms_mux.register()` and
`terminfodb.terms_desktop.register()` each add one part of the built-in set
and return the entries they added; `register_all()` adds all three.
`add_terminfo(t)` registers your own entry under its `name` and `aliases`.

`lookup_terminfo` raises `TermNotFoundError` for an empty or unknown name.
When a name ending in `-truecolor` is not registered, it falls back to the
same base name with `-256color`, `-88color`, `-color` or no suffix; a name
ending in `-256color` falls back to `-88color` or `-color` and is given the
xterm 256-colour sequences. It adds 24-bit colour sequences when the entry
is marked true-colour, when `COLORTERM` is `truecolor`, `24bit` or
`24-bit`, or when `TCELL_TRUECOLOR` is set to anything other than
`disable` (which turns them off). These amendments are made to the
registered entry itself, which is what is returned.

`tcolor(fi, bi)` leaves out a colour given as -1 or not below the entry's
`colors`; on 8-colour terminals colours 8 to 15 are mapped down to 0 to 7.

## Expanding parameter strings

```python
from terminfodb.params import tparm

tparm("\x1b[%i%p1%d;%p2%dH", 9, 7)          # '\x1b[10;8H'
tparm("A[%p1%2.2X]B", 47)                    # 'A[2F]B'
```

At most nine arguments are used. Static variables (`%PA` to `%PZ`) keep
their values from one call to the next.

## Terminals not built in

```python
from terminfodb.dynamic import load_dynamic_terminfo
from terminfodb.terminfo import add_terminfo

ti = load_dynamic_terminfo("xterm-ghostty")
add_terminfo(ti)
```

This runs `infocmp -1 <name>` and needs ncurses' `infocmp` on the path; a
failing `infocmp` raises `subprocess.CalledProcessError`. On Windows and
other platforms without it, `load_dynamic_terminfo` raises
`TermNotFoundError`. A terminal without absolute cursor addressing raises
`NotAddressableError`. When the name is an alias, the entry returned holds
only the real terminal name. `load_terminfo(name)` returns the entry
together with the terminal's description, and `parse_infocmp`,
`build_terminfo` and `unescape` work on text you already have.

## Raw terminal input

```python
from terminfodb.tty import StdIoTty

tty = StdIoTty()
tty.notify_resize(lambda: print(tty.window_size()))
tty.start()
try:
    data = tty.read(64)
finally:
    tty.stop()
```

`StdIoTty()` raises `OSError` when standard input is not a terminal; other
streams can be passed as `StdIoTty(stdin, stdout)`. `start()` switches to
raw mode and installs a `SIGWINCH` handler, so it must be called from the
main thread; `stop()` restores the saved mode and the previous handler.
`drain()` makes pending and later reads return at once. `window_size()`
returns `(width, height)`, falling back to `COLUMNS`/`LINES` and then to
80x25 when the terminal reports zero.

## What it does not do

The package describes terminals and writes their sequences; it does not
decode keyboard or mouse input into key events, keep a screen buffer of
cells, or draw widgets. Reading from `StdIoTty` returns raw bytes.

## Running the tests

```
pip install -e ".[test]"
pytest
```