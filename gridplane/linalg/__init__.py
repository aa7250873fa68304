"""Dense linear algebra primitives."""

from gridplane.linalg.matrix import Matrix

__all__ = ["Matrix"]
