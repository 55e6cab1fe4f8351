"""Finite-state recognisers and counters for C numeric literals, with a picture catalogue and text helpers."""

__version__ = "0.1.0"