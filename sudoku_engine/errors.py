"""Errors raised while building grid formats and reading puzzles."""


class SudokuError(ValueError):
    """Base class for puzzle setup failures."""


class ConfigurationError(SudokuError):
    """Grid dimension (or solver setting) cannot describe a puzzle."""


class MalformedInputError(SudokuError):
    """Puzzle input does not hold exactly dimension² cells."""
