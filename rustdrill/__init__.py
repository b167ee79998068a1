"""Worked drill solutions, rust-analyzer project files and coloured status lines."""

__version__ = "0.1.0"