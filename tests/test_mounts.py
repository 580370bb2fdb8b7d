"""마운트 경계 도우미를 검증합니다./Validate mount boundary helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from fwalker.mounts import fs_boundaries, parse_mounts, read_mounts

FILESYSTEMS = [
    Path(p)
    for p in (
        "/proc",
        "/sys",
        "/sys/firmware/efi/efivars",
        "/dev",
        "/run",
        "/",
        "/tmp",
        "/home",
        "/boot",
        "/sys/kernel/security",
        "/sys/fs/cgroup/memory",
        "/sys/fs/cgroup/cpu,cpuacct",
        "/sys/fs/cgroup/freezer",
    )
]


def test_fs_boundaries_no_boundary() -> None:
    assert fs_boundaries(FILESYSTEMS, Path("/home/user")) == []


def test_fs_boundaries_single_boundary() -> None:
    assert fs_boundaries(FILESYSTEMS, Path("/sys/kernel")) == [Path("/sys/kernel/security")]


def test_fs_boundaries_excludes_the_path_itself() -> None:
    """경로 자신은 경계가 아닙니다./The path itself is not a boundary."""

    expected = [fs for fs in FILESYSTEMS if fs != Path("/")]
    assert fs_boundaries(FILESYSTEMS, Path("/")) == expected


def test_fs_boundaries_multiple_boundaries() -> None:
    assert fs_boundaries(FILESYSTEMS, Path("/sys/fs")) == [
        Path("/sys/fs/cgroup/memory"),
        Path("/sys/fs/cgroup/cpu,cpuacct"),
        Path("/sys/fs/cgroup/freezer"),
    ]


def test_fs_boundaries_compares_components_not_prefixes() -> None:
    assert fs_boundaries([Path("/homework"), Path("/home/a")], Path("/home")) == [Path("/home/a")]


def test_parse_mounts_decodes_escapes() -> None:
    text = (
        "proc /proc proc rw,nosuid 0 0\n"
        "/dev/sdb1 /media/my\\040disk ext4 rw 0 0\n"
        "\n"
    )
    assert parse_mounts(text) == [Path("/proc"), Path("/media/my disk")]


def test_read_mounts_from_file(tmp_path: Path) -> None:
    table = tmp_path / "mounts"
    table.write_text("tmpfs /tmp tmpfs rw 0 0\n", encoding="utf-8")
    assert read_mounts(table) == [Path("/tmp")]


def test_read_mounts_missing_table_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_mounts(tmp_path / "absent")
