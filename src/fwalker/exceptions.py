"""워커 전용 예외를 정의합니다./Define walker specific exceptions."""

from __future__ import annotations

from pathlib import Path


class WalkError(RuntimeError):
    """순회 오류 기본 클래스./Base class for walk errors."""


class RootUnavailable(WalkError):
    """루트를 디렉터리로 열 수 없음./Root cannot be opened as a directory.

    생성 시점에만 발생하며 순회 중에는 발생하지 않습니다.
    Raised at construction only, never from ``next()``.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
