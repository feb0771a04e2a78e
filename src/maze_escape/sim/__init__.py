"""Headless simulation of the maze crawler: maze, battles, progression."""
