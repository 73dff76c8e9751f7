"""Fixed-size vectors (vecmat.vector) and square matrices (vecmat.matrix)."""

__version__ = "0.1.0"
__all__ = ["matrix", "vector"]