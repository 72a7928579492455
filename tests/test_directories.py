import os

import pytest

from unixdemo import directories


def test_change_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "sub"
    target.mkdir()
    assert directories.change_directory(target) == os.path.realpath(target)
    assert os.getcwd() == os.path.realpath(target)


def test_change_directory_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        directories.change_directory(tmp_path / "missing")


def test_change_directory_fd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "other"
    target.mkdir()
    assert directories.change_directory_fd(target) == os.path.realpath(target)


def test_change_directory_fd_on_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    regular = tmp_path / "file.txt"
    regular.write_text("x")
    with pytest.raises(NotADirectoryError):
        directories.change_directory_fd(regular)
    assert os.getcwd() == os.path.realpath(tmp_path)


def test_enter_chroot_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        directories.enter_chroot(tmp_path / "missing", 0)


def test_enter_chroot_on_file(tmp_path):
    regular = tmp_path / "plain"
    regular.write_text("x")
    with pytest.raises(NotADirectoryError):
        directories.enter_chroot(regular, 0)


def test_main_chdir(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert directories.main(["chdir", str(tmp_path)]) == 0
    assert capsys.readouterr().out == os.path.realpath(tmp_path) + "\n"


def test_main_chdir_failure(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert directories.main(["chdir", str(tmp_path / "missing")]) == 1
    assert capsys.readouterr().err.startswith("chdir: ")