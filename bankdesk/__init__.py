"""Bank desk library: file-backed clients, transfers and currencies, with date, text and number helpers."""

__version__ = "0.1.0"