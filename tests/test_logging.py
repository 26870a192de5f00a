import logging
from logging.handlers import RotatingFileHandler

import pytest

from packages.core import logging_


@pytest.fixture
def bare_root(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    yield root
    for handler in root.handlers:
        handler.close()


def test_console_and_rotating_file(bare_root, tmp_path, monkeypatch):
    monkeypatch.setattr(logging_, "ensure_app_dirs", lambda: None)
    monkeypatch.setattr(logging_, "log_path", lambda: tmp_path / "app.log")

    logging_.setup_logging()

    kinds = [type(h) for h in bare_root.handlers]
    assert kinds == [logging.StreamHandler, RotatingFileHandler]
    assert bare_root.level == logging.INFO


def test_unwritable_log_dir_falls_back_to_console(bare_root, monkeypatch):
    def read_only_home():
        raise PermissionError("read-only file system")

    monkeypatch.setattr(logging_, "ensure_app_dirs", read_only_home)

    logging_.setup_logging()

    assert [type(h) for h in bare_root.handlers] == [logging.StreamHandler]


def test_setup_is_idempotent(bare_root, tmp_path, monkeypatch):
    monkeypatch.setattr(logging_, "ensure_app_dirs", lambda: None)
    monkeypatch.setattr(logging_, "log_path", lambda: tmp_path / "app.log")

    logging_.setup_logging()
    logging_.setup_logging()

    assert len(bare_root.handlers) == 2
