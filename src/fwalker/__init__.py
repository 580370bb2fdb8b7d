"""지연 파일 순회 API./Lazy file walking API."""

from __future__ import annotations

from .exceptions import RootUnavailable, WalkError
from .models import (
    Candidate,
    DirectoryIdentity,
    DirectoryUnreadable,
    EntryKind,
    Predicate,
    WalkOptions,
    WalkStatistics,
)
from .walker import Walker

__all__ = [
    "Candidate",
    "DirectoryIdentity",
    "DirectoryUnreadable",
    "EntryKind",
    "Predicate",
    "RootUnavailable",
    "WalkError",
    "WalkOptions",
    "WalkStatistics",
    "Walker",
]
