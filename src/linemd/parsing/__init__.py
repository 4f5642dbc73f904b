"""Shared parsing constants for the linemd lexer."""
