"""스캔 대기 디렉터리 스택./Stack of directories awaiting a scan."""

from __future__ import annotations

from typing import Iterable

from .models import PendingDirectory


class Frontier:
    """후입선출 프런티어로 깊이 우선 순서를 만듭니다./LIFO frontier giving depth-first order."""

    __slots__ = ("_stack",)

    def __init__(self) -> None:
        self._stack: list[PendingDirectory] = []

    def push(self, directory: PendingDirectory) -> None:
        self._stack.append(directory)

    def extend(self, directories: Iterable[PendingDirectory]) -> None:
        """하위 디렉터리를 추가합니다./Push discovered subdirectories.

        먼저 나열된 항목이 먼저 꺼내지도록 역순으로 쌓습니다.
        Stacked in reverse so the first listed entry is popped first.
        """

        self._stack.extend(reversed(list(directories)))

    def pop(self) -> PendingDirectory:
        return self._stack.pop()

    def __bool__(self) -> bool:
        return bool(self._stack)
