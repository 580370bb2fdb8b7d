"""순회 설정 모델(KR). Walk configuration models (EN)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field

from fwalker import Walker, WalkOptions
from fwalker.filters import exclude_glob, include_glob, matches_regex
from fwalker.models import Predicate


class WalkConfig(BaseModel):
    """파일에서 읽는 순회 설정 · Walk settings loadable from a file."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    root: Path = Field(default_factory=lambda: Path("."))
    max_depth: Optional[int] = Field(default=None, ge=0)
    follow_symlinks: bool = False
    skip_hidden: bool = False
    same_filesystem: bool = False
    include: Tuple[str, ...] = ()
    exclude: Tuple[str, ...] = ()
    pattern: Optional[str] = None

    @classmethod
    def from_file(cls, config_file: Path) -> "WalkConfig":
        """설정 파일에서 로드 · Load settings from config file."""

        data = (
            yaml.safe_load(config_file.read_text(encoding="utf-8"))
            if config_file.exists()
            else {}
        )
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("configuration file must contain a mapping")
        return cls.model_validate(data)

    def predicates(self) -> Tuple[Predicate, ...]:
        """포함/제외/정규식을 조건으로 변환 · Turn include, exclude and pattern into predicates."""

        built: list[Predicate] = []
        if self.include:
            built.append(include_glob(*self.include))
        if self.exclude:
            built.append(exclude_glob(*self.exclude))
        if self.pattern:
            built.append(matches_regex(self.pattern))
        return tuple(built)

    def to_options(self) -> WalkOptions:
        """``WalkOptions`` 를 생성 · Build ``WalkOptions``."""

        return WalkOptions(
            max_depth=self.max_depth,
            follow_symlinks=self.follow_symlinks,
            skip_hidden=self.skip_hidden,
            same_filesystem=self.same_filesystem,
            predicates=self.predicates(),
        )

    def build_walker(self) -> Walker:
        """설정대로 워커를 생성 · Create a walker from these settings.

        루트가 유효하지 않으면 ``RootUnavailable`` 이 발생한다.
        Raises ``RootUnavailable`` for an invalid root.
        """

        return Walker(self.root.expanduser(), self.to_options())


__all__ = ["WalkConfig"]
