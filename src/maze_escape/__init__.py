"""Maze Escape -- a headless maze-exploration and turn-based battle engine."""

__version__ = "0.1.0"
