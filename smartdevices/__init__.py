"""Simulated smart socket and thermometer with a TCP text dashboard server."""

__version__ = "0.1.0"