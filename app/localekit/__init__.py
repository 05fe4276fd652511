"""localekit - runtime translation lookup with locale fallback."""

__version__ = "0.1.0"
