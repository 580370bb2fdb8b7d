"""워커 데이터 모델 정의./Define walker data models."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Tuple


class EntryKind(enum.Enum):
    """디렉터리 항목 분류./Classification of a directory entry."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(slots=True, frozen=True)
class Candidate:
    """필터에 전달되는 후보 파일./Candidate file handed to predicates."""

    path: Path
    relative: str
    depth: int
    is_symlink: bool = False

    @property
    def name(self) -> str:
        return self.path.name


Predicate = Callable[[Candidate], bool]


@dataclass(slots=True, frozen=True)
class DirectoryIdentity:
    """물리 디렉터리 식별자./Opaque key for a physical directory.

    경로가 달라도 같은 디렉터리면 같은 값을 가집니다.
    Equal for every path that reaches the same directory.
    """

    device: int
    inode: int


@dataclass(slots=True, frozen=True)
class PendingDirectory:
    """프런티어에 대기 중인 디렉터리./Directory waiting on the frontier."""

    path: Path
    depth: int
    via_symlink: bool = False


@dataclass(slots=True)
class Level:
    """단일 디렉터리 스캔 결과./Result of scanning one directory."""

    files: list[Path] = field(default_factory=list)
    directories: list[PendingDirectory] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class WalkOptions:
    """순회 동작 설정./Configuration for walking behaviour.

    ``max_depth`` 가 ``None`` 이면 무제한, ``0`` 이면 루트 직계 항목만.
    ``None`` means unbounded; ``0`` lists only the root's own entries.
    """

    max_depth: int | None = None
    follow_symlinks: bool = False
    skip_hidden: bool = False
    same_filesystem: bool = False
    predicates: Tuple[Predicate, ...] = ()

    def accepts(self, candidate: Candidate) -> bool:
        """모든 조건을 순서대로 평가./Evaluate predicates left to right."""

        return all(predicate(candidate) for predicate in self.predicates)


@dataclass(slots=True)
class DirectoryUnreadable:
    """읽지 못하고 건너뛴 디렉터리./Directory skipped because it was unreadable."""

    path: str
    message: str


ErrorCallback = Callable[[DirectoryUnreadable], None]


@dataclass(slots=True)
class WalkStatistics:
    """순회 누적 통계./Running walk statistics."""

    directories_scanned: int = 0
    directories_skipped: int = 0
    cycles_skipped: int = 0
    files_yielded: int = 0
    errors: int = 0
