"""Interactive shell front end with a quote-aware lexer, environment handling and string utilities."""

__version__ = "0.1.0"