"""Curses user interface."""
