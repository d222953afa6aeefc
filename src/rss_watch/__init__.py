"""Scriptable RSS/Atom feed watching tool."""

__version__ = "0.3.0"
