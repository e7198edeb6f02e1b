"""Opinionated checks for C# using directives."""

__version__ = "0.1.0"
