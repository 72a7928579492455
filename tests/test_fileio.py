import os

import pytest

from unixdemo.fileio import (
    HELLO,
    OPENAT_MESSAGE,
    copy_file,
    echo_once,
    main,
    write_at,
    write_hello,
)


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


def test_copy_file_round_trip(tmp_path):
    source = tmp_path / "in.bin"
    payload = bytes(range(256)) * 10
    source.write_bytes(payload)
    destination = tmp_path / "out.bin"
    assert copy_file(source, destination) == len(payload)
    assert destination.read_bytes() == payload


def test_copy_file_truncates_existing_destination(tmp_path):
    source = tmp_path / "in.txt"
    source.write_bytes(b"short")
    destination = tmp_path / "out.txt"
    destination.write_bytes(b"a much longer existing content")
    copy_file(source, destination)
    assert destination.read_bytes() == b"short"


def test_copy_file_empty_source(tmp_path):
    source = tmp_path / "empty"
    source.write_bytes(b"")
    destination = tmp_path / "copy"
    assert copy_file(source, destination) == 0
    assert destination.read_bytes() == b""


def test_copy_file_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_file(tmp_path / "missing", tmp_path / "out")
    assert not (tmp_path / "out").exists()


def test_write_at_creates_file(tmp_path):
    assert write_at(tmp_path, "file.txt") == len(OPENAT_MESSAGE)
    assert (tmp_path / "file.txt").read_bytes() == b"This file was created using openat().\n"


def test_write_at_truncates(tmp_path):
    target = tmp_path / "data"
    target.write_bytes(b"x" * 100)
    write_at(tmp_path, "data", b"abc")
    assert target.read_bytes() == b"abc"


def test_write_at_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_at(tmp_path / "nope", "file.txt")


def test_echo_once_copies_between_descriptors(pipe, tmp_path):
    read_fd, write_fd = pipe
    os.write(write_fd, b"some input")
    out_path = tmp_path / "echo"
    out_fd = os.open(out_path, os.O_WRONLY | os.O_CREAT)
    try:
        data = echo_once(read_fd, out_fd)
    finally:
        os.close(out_fd)
    assert data == b"some input"
    assert out_path.read_bytes() == b"some input"


def test_echo_once_respects_size(pipe, tmp_path):
    read_fd, write_fd = pipe
    os.write(write_fd, b"0123456789")
    out_path = tmp_path / "echo"
    out_fd = os.open(out_path, os.O_WRONLY | os.O_CREAT)
    try:
        data = echo_once(read_fd, out_fd, 4)
    finally:
        os.close(out_fd)
    assert data == b"0123"
    assert out_path.read_bytes() == data


def test_write_hello_to_pipe(pipe):
    read_fd, write_fd = pipe
    assert write_hello(write_fd) == 6
    assert os.read(read_fd, 100) == b"Hello\n"


def test_write_hello_bad_descriptor(pipe):
    read_fd, write_fd = pipe
    os.close(write_fd)
    with pytest.raises(OSError):
        write_hello(write_fd)


def test_main_write(capfd):
    assert main(["write"]) == 0
    assert capfd.readouterr().out == HELLO.decode()


def test_main_open_copies(tmp_path):
    source = tmp_path / "hosts"
    source.write_bytes(b"127.0.0.1 localhost\n")
    destination = tmp_path / "file.txt"
    assert main(["open", "--source", str(source), "--destination", str(destination)]) == 0
    assert destination.read_bytes() == source.read_bytes()


def test_main_open_missing_source_fails(tmp_path, capsys):
    missing = tmp_path / "missing"
    assert main(["open", "--source", str(missing), "--destination", str(tmp_path / "o")]) == 1
    assert str(missing) in capsys.readouterr().err


def test_main_openat(tmp_path):
    assert main(["openat", "--directory", str(tmp_path), "--name", "made.txt"]) == 0
    assert (tmp_path / "made.txt").read_bytes() == OPENAT_MESSAGE