import pytest

from kbfsio.filesystem.mounted import MountedBackend


@pytest.fixture
def backend():
    return MountedBackend()


def test_exists(backend, tmp_path):
    (tmp_path / "file").write_bytes(b"abc")

    assert backend.exists(str(tmp_path / "file"))
    assert backend.exists(str(tmp_path))
    assert not backend.exists(str(tmp_path / "missing"))


def test_exists_other_errors_propagate(backend, tmp_path):
    (tmp_path / "file").write_bytes(b"abc")

    # Stat'ing beneath a regular file is an error, not a missing file
    with pytest.raises(NotADirectoryError):
        backend.exists(str(tmp_path / "file" / "child"))


def test_read(backend, tmp_path):
    (tmp_path / "file").write_bytes(b"abc\x00\ndef")

    assert backend.read(str(tmp_path / "file")) == b"abc\x00\ndef"


def test_read_missing(backend, tmp_path):
    with pytest.raises(FileNotFoundError):
        backend.read(str(tmp_path / "missing"))
