"""
Artifact placement.

This package handles:
1. Downloading the primary payload and the library artifacts
2. Writing them into the cache tree
3. Tolerating failed native library downloads
"""

from .placer import ArtifactPlacer

__all__ = ["ArtifactPlacer"]
