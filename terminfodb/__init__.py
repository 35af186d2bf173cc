"""Terminal capability database, parameter expansion, infocmp loading and a raw stdio tty."""

__version__ = "0.1.0"

__all__ = ["params", "terminfo", "tty", "dynamic", "terms_base", "terms_mux", "terms_desktop"]