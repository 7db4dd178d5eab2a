"""
Artifact planning.

This package handles:
1. Classifying each library as native or ordinary for the current platform
2. Computing where each artifact lands in the cache
3. Marking which artifacts are already present and need no download
"""

from .planner import ArtifactKind, ArtifactPlanner, DownloadPlan, DownloadStatus

__all__ = ["ArtifactKind", "ArtifactPlanner", "DownloadPlan", "DownloadStatus"]
