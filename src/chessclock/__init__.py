"""Chessclock — a two-player chess clock with Fischer and Bronstein increments."""

__version__ = "1.0.1"
