"""Trigonometry Run: a side-scrolling arcade game on a small pygame-based 2D engine."""

__version__ = "0.1.0"