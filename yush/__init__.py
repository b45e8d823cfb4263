"""A small command shell with variables, aliases, functions and history."""

__version__ = "0.6.5"