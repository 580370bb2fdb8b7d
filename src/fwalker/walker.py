"""지연 디렉터리 순회기./Lazy directory walker.

재귀 제너레이터 대신 명시적 상태 기계(프런티어 스택과 대기 파일 버퍼)로
구현되어 ``next()`` 한 번에 결과 하나를 만들 만큼만 작업합니다.

Implemented as an explicit state machine (a frontier stack plus a buffer of
pending files) instead of a recursive generator, so each ``next()`` does only
the work needed to produce one path.

순회 중 읽을 수 없는 디렉터리는 경고 로그를 남기고 건너뜁니다. 호출자에게는
"예상보다 적은 파일"로만 드러나며 ``next()`` 에서 예외가 발생하지 않습니다.
생성 시점의 루트 오류만 ``RootUnavailable`` 로 전달됩니다.

Unreadable directories met during the walk are logged and skipped; callers
only see fewer files, never an exception from ``next()``. Only a bad root is
surfaced, as ``RootUnavailable`` at construction.

단일 소비자용이며 내부 잠금이 없습니다. 응답 없는 마운트에서는 해당
``next()`` 호출이 멈출 수 있으며 자체 타임아웃은 없습니다.
One consumer at a time, no internal locking. A hung mount blocks the
current ``next()`` call; there is no timeout.
"""

from __future__ import annotations

import logging
import os
import stat
from collections import deque
from dataclasses import replace
from pathlib import Path
from typing import Iterator

from .exceptions import RootUnavailable
from .frontier import Frontier
from .models import (
    DirectoryIdentity,
    DirectoryUnreadable,
    ErrorCallback,
    PendingDirectory,
    Predicate,
    WalkOptions,
    WalkStatistics,
)
from .scanner import scan_level

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


def directory_identity(path: Path) -> DirectoryIdentity:
    """링크를 따라간 디렉터리 식별자./Identity of the directory, following links."""

    stat_result = os.stat(path)
    return DirectoryIdentity(device=stat_result.st_dev, inode=stat_result.st_ino)


def _probe_root(root: Path) -> DirectoryIdentity:
    try:
        stat_result = os.stat(root)
    except FileNotFoundError as exc:
        raise RootUnavailable(root, "does not exist") from exc
    except OSError as exc:
        raise RootUnavailable(root, exc.strerror or str(exc)) from exc
    if not stat.S_ISDIR(stat_result.st_mode):
        raise RootUnavailable(root, "not a directory")
    try:
        with os.scandir(root):
            pass
    except OSError as exc:
        raise RootUnavailable(root, exc.strerror or str(exc)) from exc
    return DirectoryIdentity(device=stat_result.st_dev, inode=stat_result.st_ino)


class Walker:
    """디렉터리가 아닌 경로를 하나씩 생성합니다./Yield non-directory paths one at a time.

    결과 순서는 파일 시스템 나열 순서를 따르며 보장되지 않습니다. 정렬이
    필요하면 호출자가 정렬해야 합니다.
    Order follows filesystem listing order and is not guaranteed; sort
    externally when a stable order matters.
    """

    def __init__(
        self,
        root: PathLike,
        options: WalkOptions | None = None,
        *,
        on_error: ErrorCallback | None = None,
    ) -> None:
        options = options or WalkOptions()
        if options.max_depth is not None and options.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {options.max_depth}")
        self._root = Path(root)
        self._options = options
        self._on_error = on_error
        self._root_identity = _probe_root(self._root)
        self._frontier = Frontier()
        self._frontier.push(PendingDirectory(path=self._root, depth=0))
        self._pending: deque[Path] = deque()
        self._visited: set[DirectoryIdentity] = set()
        self._exhausted = False
        self.stats = WalkStatistics()

    @classmethod
    def from_path(cls, root: PathLike) -> "Walker":
        """명시적 경로에서 생성./Create from an explicit path."""

        return cls(root)

    @classmethod
    def from_cwd(cls) -> "Walker":
        """현재 작업 디렉터리에서 생성./Create from the process working directory."""

        return cls(Path.cwd())

    @property
    def root(self) -> Path:
        return self._root

    @property
    def options(self) -> WalkOptions:
        return self._options

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    # 설정 빌더는 모두 같은 루트에서 시작하는 새 워커를 돌려줍니다.
    # Builders return a fresh, unstarted walker over the same root.

    def _reconfigure(self, **changes: object) -> "Walker":
        return Walker(self._root, replace(self._options, **changes), on_error=self._on_error)

    def max_depth(self, depth: int) -> "Walker":
        if depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {depth}")
        return self._reconfigure(max_depth=depth)

    def follow_symlinks(self, flag: bool = True) -> "Walker":
        return self._reconfigure(follow_symlinks=flag)

    def skip_hidden(self, flag: bool = True) -> "Walker":
        return self._reconfigure(skip_hidden=flag)

    def same_filesystem(self, flag: bool = True) -> "Walker":
        return self._reconfigure(same_filesystem=flag)

    def filter(self, predicate: Predicate) -> "Walker":
        """기존 조건 뒤에 AND 로 추가./AND a predicate after existing ones."""

        return self._reconfigure(predicates=self._options.predicates + (predicate,))

    def on_error(self, callback: ErrorCallback | None) -> "Walker":
        """건너뛴 디렉터리 알림 콜백 설정./Set a callback for skipped directories."""

        return Walker(self._root, self._options, on_error=callback)

    def __iter__(self) -> Iterator[Path]:
        return self

    def __next__(self) -> Path:
        while True:
            if self._pending:
                self.stats.files_yielded += 1
                return self._pending.popleft()
            if self._exhausted or not self._frontier:
                self._finish()
                raise StopIteration
            self._expand(self._frontier.pop())

    def _finish(self) -> None:
        if self._exhausted:
            return
        self._exhausted = True
        self._visited.clear()
        logger.debug(
            "walk of %s finished: %d files, %d directories scanned, %d skipped",
            self._root,
            self.stats.files_yielded,
            self.stats.directories_scanned,
            self.stats.directories_skipped,
        )

    def _expand(self, directory: PendingDirectory) -> None:
        """프런티어에서 꺼낸 디렉터리 하나를 처리./Process one directory popped from the frontier."""

        options = self._options
        if options.max_depth is not None and directory.depth > options.max_depth:
            self.stats.directories_skipped += 1
            return
        if directory.via_symlink and not options.follow_symlinks:
            self.stats.directories_skipped += 1
            return
        try:
            identity = directory_identity(directory.path)
        except OSError as exc:
            self._report(directory.path, exc)
            return
        if options.same_filesystem and identity.device != self._root_identity.device:
            logger.debug("not crossing filesystem boundary at %s", directory.path)
            self.stats.directories_skipped += 1
            return
        if identity in self._visited:
            logger.debug("already visited %s; skipping", directory.path)
            self.stats.cycles_skipped += 1
            return
        self._visited.add(identity)
        try:
            level = scan_level(directory, self._root, options)
        except OSError as exc:
            self._report(directory.path, exc)
            return
        self.stats.directories_scanned += 1
        self._frontier.extend(level.directories)
        self._pending.extend(level.files)

    def _report(self, path: Path, error: OSError) -> None:
        record = DirectoryUnreadable(path=str(path), message=error.strerror or str(error))
        self.stats.errors += 1
        self.stats.directories_skipped += 1
        logger.warning("skipping unreadable directory %s: %s", path, record.message)
        if self._on_error is not None:
            self._on_error(record)

    def __repr__(self) -> str:
        return f"Walker(root={str(self._root)!r}, options={self._options!r})"
