"""Runtime pieces of a small JavaScript interpreter: UTF-8 runes, a regular expression compiler and value conversions."""

__version__ = "1.3.6"