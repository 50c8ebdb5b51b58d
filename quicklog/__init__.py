"""tempo-quicklog: natural-language Tempo time entries and day timelines."""

__version__ = "0.4.0"
