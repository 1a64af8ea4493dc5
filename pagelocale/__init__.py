"""pagelocale - locale resolution, catalog loading and document translation."""

__version__ = "0.1.0"
