"""Utility helpers for docnav."""
