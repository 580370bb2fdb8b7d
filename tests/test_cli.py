"""fwalk CLI 를 검증합니다./Validate the fwalk CLI."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from cli.fwalk import cli, main


def _invoke(tmp_path: Path, *args: str):  # type: ignore[no-untyped-def]
    runner = CliRunner()
    return runner.invoke(cli, ["--log-file", str(tmp_path / "logs" / "fwalk.log"), *args])


def test_walk_prints_every_file(sample_tree: Path, tmp_path: Path) -> None:
    """모든 파일을 한 줄씩 출력한다 · Prints every file one per line."""

    result = _invoke(tmp_path, "walk", str(sample_tree))
    assert result.exit_code == 0, result.output
    lines = {Path(line).relative_to(sample_tree).as_posix() for line in result.output.splitlines()}
    assert lines == {"a.txt", "b.txt", "sub/c.txt"}


def test_walk_limit_and_depth(sample_tree: Path, tmp_path: Path) -> None:
    result = _invoke(tmp_path, "walk", str(sample_tree), "--max-depth", "0", "--limit", "1")
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert len(lines) == 1
    assert Path(lines[0]).parent == sample_tree


def test_walk_include_filter(nested_tree: Path, tmp_path: Path) -> None:
    result = _invoke(tmp_path, "walk", str(nested_tree), "--include", "*.md", "--skip-hidden")
    assert result.exit_code == 0, result.output
    names = sorted(Path(line).name for line in result.output.splitlines())
    assert names == ["readme.md", "second.md"]


def test_walk_uses_config_file(nested_tree: Path, tmp_path: Path) -> None:
    """구성 파일 값을 적용한다 · Applies config file values."""

    config_file = tmp_path / "walk.yml"
    config_file.write_text(f"root: '{nested_tree.as_posix()}'\nmax_depth: 0\n", encoding="utf-8")
    result = _invoke(tmp_path, "--config-file", str(config_file), "walk")
    assert result.exit_code == 0, result.output
    names = sorted(Path(line).name for line in result.output.splitlines())
    assert names == [".hidden_file", "top.txt"]


def test_walk_missing_root_fails(tmp_path: Path) -> None:
    result = _invoke(tmp_path, "walk", str(tmp_path / "missing"))
    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_mounts_lists_boundaries(tmp_path: Path, monkeypatch) -> None:  # type: ignore[no-untyped-def]
    import cli.fwalk as fwalk_module

    monkeypatch.setattr(
        fwalk_module, "read_mounts", lambda: [Path("/"), Path("/srv"), Path("/srv/data")]
    )
    result = _invoke(tmp_path, "mounts", "/srv")
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [str(Path("/srv/data"))]


def test_main_returns_exit_code(tmp_path: Path) -> None:
    log_file = str(tmp_path / "fwalk.log")
    assert main(["--log-file", log_file, "walk", str(tmp_path / "missing")]) == 1
    assert main(["--log-file", log_file, "walk", str(tmp_path)]) == 0


def test_mounts_resolves_relative_path(tmp_path: Path, monkeypatch) -> None:  # type: ignore[no-untyped-def]
    """상대 경로도 절대 경로로 비교한다 · Relative paths are resolved before matching."""

    import cli.fwalk as fwalk_module

    base = tmp_path.resolve() / "srv"
    base.mkdir()
    monkeypatch.setattr(fwalk_module, "read_mounts", lambda: [Path("/"), base, base / "data"])
    monkeypatch.chdir(base)
    result = _invoke(tmp_path, "mounts", ".")
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [str(base / "data")]
