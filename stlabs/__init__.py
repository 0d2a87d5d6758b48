"""Exercises on sequences, text and containers: insertion sorts, text reflow, queues, factorials, shapes and statistics."""

__version__ = "1.0.0"