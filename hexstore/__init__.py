"""Product catalogue with domain rules, SQLite storage, a command line and a JSON HTTP API."""

__version__ = "0.1.0"
__all__ = ["__version__"]