"""Textual user interface for docnav."""
