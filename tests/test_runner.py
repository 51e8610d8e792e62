# tests/test_runner.py

import subprocess
from unittest.mock import patch

from volumectl.core.runner import CommandRunner, read_text


def completed(returncode=0, stdout='', stderr=''):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


def test_run_success():
    with patch('subprocess.run', return_value=completed(stdout='test\n')) as run:
        result = CommandRunner(timeout=10).run('docker', ['volume', 'ls', '--format={{.Name}}'])

    assert result.ok is True
    assert result.stdout == 'test\n'
    args, kwargs = run.call_args
    assert args[0] == ['docker', 'volume', 'ls', '--format={{.Name}}']
    assert kwargs['timeout'] == 10
    assert kwargs['stdin'] == subprocess.DEVNULL
    assert 'shell' not in kwargs

def test_run_passes_input():
    with patch('subprocess.run', return_value=completed()) as run:
        CommandRunner().run('docker', ['volume', 'prune'], input='y\n')

    kwargs = run.call_args[1]
    assert kwargs['input'] == 'y\n'
    assert 'stdin' not in kwargs

def test_run_failure_keeps_output():
    with patch('subprocess.run', return_value=completed(1, '[]\n', 'no such volume')):
        result = CommandRunner().run('docker', ['volume', 'inspect', 'ghost'])

    assert result.ok is False
    assert result.stdout == '[]\n'
    assert result.returncode == 1

def test_missing_executable():
    with patch('subprocess.run', side_effect=FileNotFoundError()):
        result = CommandRunner().run('docker', ['volume', 'ls'])
    assert result.ok is False
    assert result.stdout == ''

def test_timeout():
    with patch('subprocess.run', side_effect=subprocess.TimeoutExpired(['docker'], 1)):
        result = CommandRunner(timeout=1).run('docker', ['volume', 'ls'])
    assert result.ok is False

def test_real_process():
    result = CommandRunner(timeout=10).run('ls', ['-1', '/'])
    assert result.ok is True

def test_read_text(tmp_path):
    path = tmp_path / 'file.txt'
    path.write_text('héllo\n', encoding='utf-8')
    assert read_text(str(path)) == 'héllo\n'
