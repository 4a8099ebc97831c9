"""Hex-grid cat-catching game and lattice noise building blocks."""

__version__ = "0.1.0"
__all__ = ["hexgame", "noise_lookup", "noise_basis", "noise_lattice"]