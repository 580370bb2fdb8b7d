"""마운트 경계 도우미./Mount boundary helpers.

Linux 의 ``/proc/mounts`` 를 읽습니다. macOS 와 Windows 는 지원하지 않습니다.
Reads the Linux ``/proc/mounts`` table; macOS and Windows are not covered.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

LINUX_MOUNTS_FILE = Path("/proc/mounts")

_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


def _unescape(field: str) -> str:
    # /proc/mounts encodes space, tab, newline and backslash as \ooo
    return _OCTAL_ESCAPE.sub(lambda match: chr(int(match.group(1), 8)), field)


def parse_mounts(text: str) -> list[Path]:
    """마운트 테이블 텍스트에서 마운트 지점을 추출./Extract mount points from mount table text."""

    mounts: list[Path] = []
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 2:
            continue
        mounts.append(Path(_unescape(fields[1])))
    return mounts


def read_mounts(path: Path = LINUX_MOUNTS_FILE) -> list[Path]:
    """마운트 지점 목록을 읽습니다./Read mounted filesystems.

    테이블을 읽지 못하면 ``OSError`` 가 전파됩니다.
    Propagates ``OSError`` when the table cannot be read.
    """

    return parse_mounts(path.read_text(encoding="utf-8"))


def fs_boundaries(filesystems: Iterable[Path], path: Path) -> list[Path]:
    """``path`` 아래에 있는 마운트 지점을 반환./Return mount points strictly below ``path``.

    순서는 입력 순서를 유지하며 ``path`` 자체는 포함하지 않습니다.
    Input order is kept and ``path`` itself is excluded.
    """

    return [fs for fs in filesystems if fs != path and fs.is_relative_to(path)]


__all__ = ["LINUX_MOUNTS_FILE", "fs_boundaries", "parse_mounts", "read_mounts"]
