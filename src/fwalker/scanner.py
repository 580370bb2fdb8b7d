"""단일 디렉터리 스캐너./Scan exactly one directory level."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from .models import Candidate, EntryKind, Level, PendingDirectory, WalkOptions

logger = logging.getLogger(__name__)

_WINDOWS = os.name == "nt"


def is_hidden(entry: os.DirEntry[str]) -> bool:
    """숨김 항목인지 판정합니다./Return True if the entry is hidden.

    점으로 시작하는 이름은 모든 플랫폼에서 숨김이며, Windows 에서는
    ``FILE_ATTRIBUTE_HIDDEN`` 속성도 확인합니다.
    Dot-prefixed names are hidden everywhere; on Windows the hidden
    attribute counts as well.
    """

    if entry.name.startswith("."):
        return True
    if not _WINDOWS:
        return False
    try:
        attributes = entry.stat(follow_symlinks=False).st_file_attributes
    except OSError:
        return False
    return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)


def classify(entry: os.DirEntry[str], follow_symlinks: bool) -> tuple[EntryKind, bool]:
    """항목 종류와 심볼릭 링크 여부를 반환./Return entry kind and symlink flag.

    링크를 따라가지 않을 때 파일을 가리키는 링크는 파일로, 그 밖의 링크는
    ``OTHER`` 로 분류합니다.
    Without symlink following, a link to a regular file is a file and any
    other link (directory, dangling) is ``OTHER``.
    """

    is_link = entry.is_symlink()
    if entry.is_dir(follow_symlinks=follow_symlinks):
        return EntryKind.DIRECTORY, is_link
    if is_link and not follow_symlinks:
        if entry.is_file(follow_symlinks=True):
            return EntryKind.FILE, True
        return EntryKind.OTHER, True
    if entry.is_file(follow_symlinks=follow_symlinks):
        return EntryKind.FILE, is_link
    return EntryKind.OTHER, is_link


def _relative(path: Path, root: Path) -> str:
    try:
        relative = path.relative_to(root)
    except ValueError:
        relative = path
    return relative.as_posix()


def scan_level(directory: PendingDirectory, root: Path, options: WalkOptions) -> Level:
    """디렉터리 하나를 읽어 파일과 하위 디렉터리로 나눕니다./Split one directory into files and subdirectories.

    파일은 숨김 정책과 포함 조건을 이미 통과한 상태로 반환됩니다. 항목 순서는
    파일 시스템이 돌려준 순서 그대로이며 정렬하지 않습니다. 디렉터리를 열거나
    읽지 못하면 ``OSError`` 가 그대로 전파됩니다.

    Returned files have already passed the hidden policy and the inclusion
    predicates. Entry order is whatever the filesystem reports; nothing is
    sorted. Failing to open or read the directory propagates ``OSError``.
    """

    level = Level()
    child_depth = directory.depth + 1
    with os.scandir(directory.path) as iterator:
        for entry in iterator:
            if options.skip_hidden and is_hidden(entry):
                continue
            try:
                kind, is_link = classify(entry, options.follow_symlinks)
            except OSError as exc:
                logger.debug("dropping entry %s: %s", entry.path, exc)
                continue
            entry_path = Path(entry.path)
            if kind is EntryKind.DIRECTORY:
                level.directories.append(
                    PendingDirectory(path=entry_path, depth=child_depth, via_symlink=is_link)
                )
            elif kind is EntryKind.FILE:
                candidate = Candidate(
                    path=entry_path,
                    relative=_relative(entry_path, root),
                    depth=directory.depth,
                    is_symlink=is_link,
                )
                if options.accepts(candidate):
                    level.files.append(entry_path)
    return level
