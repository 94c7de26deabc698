from pathlib import Path

from newsgrid.utils.files import get_logs_path, get_project_root, init_newsgrid, is_initialized
from newsgrid.utils.logging import setup_local_logging


def test_get_project_root(monkeypatch, tmp_path):
    project_root = tmp_path / 'project'
    project_root.mkdir()
    (project_root / 'pyproject.toml').touch()

    sub_dir = project_root / 'src' / 'deep' / 'dir'
    sub_dir.mkdir(parents=True)

    monkeypatch.setattr(Path, 'cwd', lambda: sub_dir)

    assert get_project_root() == project_root


def test_get_project_root_default(monkeypatch, tmp_path):
    monkeypatch.setattr(Path, 'cwd', lambda: tmp_path)

    assert get_project_root() == tmp_path


def test_init_newsgrid(monkeypatch, tmp_path):
    monkeypatch.setattr('newsgrid.utils.files.get_project_root', lambda: tmp_path)

    assert not is_initialized()

    storage_path = init_newsgrid('custom_storage')

    assert is_initialized()
    assert storage_path == tmp_path / '.newsgrid' / 'custom_storage'
    assert storage_path.is_dir()
    assert (tmp_path / '.newsgrid' / '.gitignore').read_text() == '# Automatically created by newsgrid\n*\n'
    assert get_logs_path() == tmp_path / '.newsgrid' / 'logs'


def test_setup_local_logging_writes_file(tmp_path):
    import logging

    log_file = setup_local_logging('INFO', logs_dir=tmp_path / 'logs')
    try:
        logging.getLogger('newsgrid.test').info('hello from the test')
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert log_file.parent == tmp_path / 'logs'
        assert 'hello from the test' in log_file.read_text()
    finally:
        root = logging.getLogger()
        for handler in list(root.handlers):
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == str(log_file):
                root.removeHandler(handler)
                handler.close()
