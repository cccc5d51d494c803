"""Dynamic-programming, graph and number-theory algorithms."""

__version__ = "0.1.0"