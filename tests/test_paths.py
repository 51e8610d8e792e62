# tests/test_paths.py

import pytest

from volumectl.core.exceptions import PathEscapesVolume
from volumectl.core.paths import is_volume_root, sandboxed_path

ROOT = '/vol/test/_data'


@pytest.mark.parametrize('relative', [None, ''])
def test_no_fragment_is_mountpoint(relative):
    assert sandboxed_path(ROOT, relative) == ROOT

@pytest.mark.parametrize('relative, expected', [
    ('dir', ROOT + '/dir'),
    ('dir/file.txt', ROOT + '/dir/file.txt'),
    ('./dir/', ROOT + '/dir'),
    ('dir/../other', ROOT + '/other'),
    ('/dir', ROOT + '/dir'),
    ('//dir//sub', ROOT + '/dir/sub'),
    ('.', ROOT),
    ('..data', ROOT + '/..data'),
])
def test_join_normalizes(relative, expected):
    assert sandboxed_path(ROOT, relative) == expected

@pytest.mark.parametrize('relative', [
    '..',
    '../other',
    'dir/../../other',
    '/../../etc/passwd',
    'a/b/../../../_data2',
])
def test_escape_is_rejected(relative):
    with pytest.raises(PathEscapesVolume) as exc_info:
        sandboxed_path(ROOT, relative)
    assert exc_info.value.path == relative
    assert exc_info.value.mountpoint == ROOT

def test_sibling_with_common_prefix_is_rejected():
    with pytest.raises(PathEscapesVolume):
        sandboxed_path('/vol/data', '../data-other/file')

def test_nul_byte_is_rejected():
    with pytest.raises(PathEscapesVolume):
        sandboxed_path(ROOT, 'file\x00.txt')

def test_trailing_slash_on_mountpoint():
    assert sandboxed_path(ROOT + '/', 'dir') == ROOT + '/dir'

def test_root_mountpoint():
    assert sandboxed_path('/', 'etc') == '/etc'

def test_is_volume_root():
    assert is_volume_root(ROOT, ROOT + '/')
    assert not is_volume_root(ROOT, ROOT + '/dir')


# Symlinks inside a volume
@pytest.fixture
def volume_with_link(tmp_path):
    """A volume whose ``link`` entry points to a directory outside it."""
    root = tmp_path / 'vol'
    root.mkdir()
    outside = tmp_path / 'outside'
    outside.mkdir()
    (outside / 'secret').write_text('secret')
    (root / 'link').symlink_to(outside)
    return root

@pytest.mark.parametrize('relative', ['link', 'link/secret'])
def test_symlink_out_of_volume_is_rejected(volume_with_link, relative):
    with pytest.raises(PathEscapesVolume):
        sandboxed_path(str(volume_with_link), relative)

def test_symlink_through_parent_is_rejected_without_following(volume_with_link):
    with pytest.raises(PathEscapesVolume):
        sandboxed_path(str(volume_with_link), 'link/secret', follow_symlinks=False)

def test_link_itself_can_be_addressed_without_following(volume_with_link):
    path = sandboxed_path(str(volume_with_link), 'link', follow_symlinks=False)
    assert path == str(volume_with_link / 'link')

def test_symlink_within_volume_is_allowed(tmp_path):
    root = tmp_path / 'vol'
    (root / 'data').mkdir(parents=True)
    (root / 'current').symlink_to(root / 'data')
    assert sandboxed_path(str(root), 'current/file') == str(root / 'current' / 'file')

def test_mountpoint_behind_symlink(tmp_path):
    real = tmp_path / 'real'
    (real / 'dir').mkdir(parents=True)
    alias = tmp_path / 'alias'
    alias.symlink_to(real)
    assert sandboxed_path(str(alias), 'dir') == str(alias / 'dir')
