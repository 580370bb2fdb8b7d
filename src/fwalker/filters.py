"""포함 조건 팩토리./Factories for inclusion predicates.

조건은 ``Candidate`` 를 받아 ``bool`` 을 돌려주는 순수 함수입니다.
Predicates are pure functions from ``Candidate`` to ``bool``.
"""

from __future__ import annotations

import fnmatch
import re
from typing import Pattern

from .models import Candidate, Predicate


def all_of(*predicates: Predicate) -> Predicate:
    """조건을 AND 로 결합합니다./Combine predicates with short-circuit AND."""

    ordered = tuple(predicates)

    def _accept(candidate: Candidate) -> bool:
        return all(predicate(candidate) for predicate in ordered)

    return _accept


def include_glob(*patterns: str) -> Predicate:
    """상대 경로가 패턴 중 하나와 일치하면 통과./Accept relative paths matching any pattern."""

    ordered = tuple(patterns)

    def _accept(candidate: Candidate) -> bool:
        return any(fnmatch.fnmatchcase(candidate.relative, pattern) for pattern in ordered)

    return _accept


def exclude_glob(*patterns: str) -> Predicate:
    """상대 경로나 이름이 패턴과 일치하면 제외./Reject relative paths or names matching any pattern."""

    ordered = tuple(patterns)

    def _accept(candidate: Candidate) -> bool:
        for pattern in ordered:
            if fnmatch.fnmatchcase(candidate.relative, pattern):
                return False
            if fnmatch.fnmatchcase(candidate.name, pattern):
                return False
        return True

    return _accept


def matches_regex(pattern: str | Pattern[str]) -> Predicate:
    """정규식이 상대 경로에서 검색되면 통과./Accept when the regex is found in the relative path."""

    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def _accept(candidate: Candidate) -> bool:
        return compiled.search(candidate.relative) is not None

    return _accept


def has_suffix(*suffixes: str) -> Predicate:
    """확장자로 거릅니다(대소문자 무시)./Accept files with one of the suffixes, case-insensitive."""

    wanted = {suffix.lower() if suffix.startswith(".") else f".{suffix.lower()}" for suffix in suffixes}

    def _accept(candidate: Candidate) -> bool:
        return candidate.path.suffix.lower() in wanted

    return _accept


def reject_all(candidate: Candidate) -> bool:
    del candidate
    return False


__all__ = [
    "all_of",
    "exclude_glob",
    "has_suffix",
    "include_glob",
    "matches_regex",
    "reject_all",
]
