"""Settings, history, themes, line editing and command parsing for an interactive Rust REPL."""

__version__ = "1.9.0"