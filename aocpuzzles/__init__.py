"""Advent of Code solutions: 2024 days 1 to 14 and 2021 practice days 1 to 4."""

__version__ = "0.1.0"