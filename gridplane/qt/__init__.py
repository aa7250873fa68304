"""PyQt6 host backend for the grid engine."""
