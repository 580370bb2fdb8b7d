'''KR: 테스트 트리 픽스처. EN: Pytest directory tree fixtures.'''

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixtures.virtual_fs import create_virtual_tree


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    '''기본 예제 트리를 구성한다(KR). Build the basic example tree (EN).'''

    root = tmp_path / 'root'
    create_virtual_tree(
        root,
        {
            'a.txt': 'alpha\n',
            'b.txt': 'beta\n',
            'sub/c.txt': 'gamma\n',
        },
    )
    return root


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    '''깊이별 파일과 숨김 항목이 있는 트리(KR). Tree with files per depth and hidden entries (EN).'''

    root = tmp_path / 'nested'
    create_virtual_tree(
        root,
        {
            'top.txt': 'depth 0',
            'one/first.py': 'depth 1',
            'one/two/second.md': 'depth 2',
            'one/two/three/third.log': 'depth 3',
            'other/readme.md': 'depth 1',
            '.hidden_file': 'hidden',
            '.config/settings.yml': 'hidden dir',
            'one/.cache/blob.bin': 'hidden nested',
        },
    )
    return root
