"""Elias-Fano encoding of sorted integer sequences, with comparison structures and a benchmark command."""

__version__ = "0.1.0"
__all__ = ["benchmark", "bitvector", "cli", "ef", "myvec", "utils"]