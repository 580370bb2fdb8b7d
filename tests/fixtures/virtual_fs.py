"""테스트용 가상 파일 시스템 도우미./Virtual filesystem helpers for tests."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pytest


def create_virtual_tree(base: Path, files: dict[str, str]) -> list[Path]:
    """상대 경로 맵으로 파일을 생성합니다./Create files from relative path mapping."""

    created: list[Path] = []
    for relative, content in files.items():
        path = base / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        created.append(path)
    return created


def bulk_create_files(
    base: Path, count: int, *, fan_out: int = 10, prefix: str = "file", extension: str = ".txt"
) -> Iterable[Path]:
    """여러 하위 폴더에 대량 파일을 생성합니다./Spread many files over nested folders."""

    for index in range(count):
        bucket = base / f"d{index % fan_out:02d}" / f"e{(index // fan_out) % 3}"
        path = bucket / f"{prefix}_{index:05d}{extension}"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"sample-{index}", encoding="utf-8")
        yield path


def make_symlink(link: Path, target: Path, *, target_is_directory: bool = False) -> Path:
    """심볼릭 링크를 만들거나 테스트를 건너뜁니다./Create a symlink or skip the test."""

    try:
        link.symlink_to(target, target_is_directory=target_is_directory)
    except (OSError, NotImplementedError) as exc:
        pytest.skip(f"symlinks unavailable: {exc}")
    return link


def relative_set(paths: Iterable[Path], root: Path) -> set[str]:
    """루트 기준 POSIX 상대 경로 집합./Set of POSIX paths relative to root."""

    return {path.relative_to(root).as_posix() for path in paths}
