"""Bhabhi (Get Away) trick-taking card game played through chat commands."""

__version__ = "1.0.0"
