'''fwalk CLI 진입점(KR). fwalk CLI entrypoint (EN).'''

from __future__ import annotations

import itertools
import logging
import sys
from pathlib import Path
from typing import Sequence

import click

from core import WalkConfig, configure_logging
from fwalker import DirectoryUnreadable, RootUnavailable
from fwalker.mounts import fs_boundaries, read_mounts

DEFAULT_LOG = Path('.cache/fwalk.log')

logger = logging.getLogger('core.cli')


@click.group()
@click.option(
    '--config-file',
    type=click.Path(path_type=Path),
    default=None,
    help='구성 파일 경로 · Config file path',
)
@click.option('--verbose', is_flag=True, help='상세 로그 · Verbose logs')
@click.option('--quiet', is_flag=True, help='간략 로그 · Quiet logs')
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=DEFAULT_LOG,
    help='로그 파일 경로 · Log file path',
)
@click.pass_context
def cli(
    ctx: click.Context, config_file: Path | None, verbose: bool, quiet: bool, log_file: Path
) -> None:
    '''디렉터리 파일 순회 CLI · Directory file walking CLI.'''

    level = 'INFO'
    if verbose:
        level = 'DEBUG'
    if quiet:
        level = 'WARNING'
    configure_logging(log_file, level=level)
    config = WalkConfig.from_file(config_file) if config_file else WalkConfig()
    ctx.obj = {'config': config}


@cli.command()
@click.argument('path', type=click.Path(path_type=Path), required=False)
@click.option('--max-depth', type=click.IntRange(min=0), default=None, help='최대 깊이 · Max depth')
@click.option('--follow-symlinks', is_flag=True, help='링크 추적 · Follow symlinks')
@click.option('--skip-hidden', is_flag=True, help='숨김 제외 · Skip hidden entries')
@click.option(
    '--same-filesystem', is_flag=True, help='마운트 경계 유지 · Stay on one filesystem'
)
@click.option('--include', 'include', multiple=True, help='포함 패턴 · Include glob')
@click.option('--exclude', 'exclude', multiple=True, help='제외 패턴 · Exclude glob')
@click.option('--pattern', type=str, default=None, help='정규식 · Regex searched in paths')
@click.option('--limit', type=click.IntRange(min=0), default=None, help='출력 상한 · Max paths')
@click.pass_context
def walk(
    ctx: click.Context,
    path: Path | None,
    max_depth: int | None,
    follow_symlinks: bool,
    skip_hidden: bool,
    same_filesystem: bool,
    include: Sequence[str],
    exclude: Sequence[str],
    pattern: str | None,
    limit: int | None,
) -> None:
    '''파일 경로를 한 줄씩 출력한다 · Print file paths one per line.'''

    config: WalkConfig = ctx.obj['config']
    overrides: dict[str, object] = {
        'root': path,
        'max_depth': max_depth,
        'follow_symlinks': follow_symlinks or None,
        'skip_hidden': skip_hidden or None,
        'same_filesystem': same_filesystem or None,
        'include': tuple(include) or None,
        'exclude': tuple(exclude) or None,
        'pattern': pattern,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(config, name, value)
    try:
        walker = config.build_walker()
    except RootUnavailable as exc:
        raise click.ClickException(str(exc)) from exc

    skipped: list[DirectoryUnreadable] = []
    walker = walker.on_error(skipped.append)
    for found in itertools.islice(walker, limit):
        click.echo(str(found))
    for record in skipped:
        click.echo(f'skipped: {record.path}: {record.message}', err=True)
    logger.info(
        'walked %s: %d files, %d directories skipped',
        walker.root,
        walker.stats.files_yielded,
        walker.stats.directories_skipped,
    )


@cli.command()
@click.argument('path', type=click.Path(path_type=Path), default=Path('/'))
def mounts(path: Path) -> None:
    '''경로 아래의 마운트 지점을 출력한다 · Print mount points below a path.'''

    try:
        filesystems = read_mounts()
    except OSError as exc:
        raise click.ClickException(f'mount table unavailable: {exc}') from exc
    for boundary in fs_boundaries(filesystems, path.expanduser().resolve()):
        click.echo(str(boundary))


def main(argv: Sequence[str] | None = None) -> int:
    '''CLI 진입점을 실행한다 · Execute CLI entry point.'''

    argv = argv or sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name='fwalk', standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.exceptions.Abort:
        click.echo('Aborted!', err=True)
        return 1
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
