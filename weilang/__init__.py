"""Tokens, runtime values, scopes, modules and classes for the wei scripting language."""

__version__ = "0.1.0"