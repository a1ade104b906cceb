import errno
import os
import stat
import pytest

from infra.adapters.storage.local_storage_adapter import LocalStorageAdapter

def test_local_storage_does_not_create_base_path_on_init(tmp_path):
    LocalStorageAdapter(base_path=str(tmp_path / "data"))
    assert not (tmp_path / "data").exists()

def test_local_storage_ensure_directory_creates_once(tmp_path):
    """기본 디렉토리 생성 및 0755 권한 검증"""
    adapter = LocalStorageAdapter(base_path=str(tmp_path / "data"))

    old_umask = os.umask(0o022)
    try:
        assert adapter.ensure_directory("") is True
    finally:
        os.umask(old_umask)

    full_path = tmp_path / "data"
    assert full_path.is_dir()
    assert stat.S_IMODE(full_path.stat().st_mode) == 0o755

    # 이미 존재하면 False
    assert adapter.ensure_directory("") is False

def test_local_storage_path_exists(tmp_path):
    """파일 존재 여부 확인 기능 검증"""
    adapter = LocalStorageAdapter(base_path=str(tmp_path))
    (tmp_path / "2021-05-03.csv").write_text("content", encoding="utf-8")

    assert adapter.path_exists("2021-05-03.csv") is True
    assert adapter.path_exists("2021-05-04.csv") is False

def test_local_storage_path_exists_propagates_other_errors(tmp_path):
    """'파일 없음' 이외의 오류는 OSError로 전달"""
    adapter = LocalStorageAdapter(base_path=str(tmp_path))
    (tmp_path / "not_a_dir").write_text("x", encoding="utf-8")

    with pytest.raises(NotADirectoryError):
        adapter.path_exists("not_a_dir/2021-05-03.csv")

def test_local_storage_put_file(tmp_path):
    """바이트 데이터 저장 검증"""
    adapter = LocalStorageAdapter(base_path=str(tmp_path))

    adapter.put_file("binary.dat", b"\x00\x01\x02")

    assert (tmp_path / "binary.dat").read_bytes() == b"\x00\x01\x02"

def test_local_storage_put_file_never_overwrites(tmp_path):
    adapter = LocalStorageAdapter(base_path=str(tmp_path))
    (tmp_path / "2021-05-03.csv").write_bytes(b"original")

    with pytest.raises(FileExistsError):
        adapter.put_file("2021-05-03.csv", b"new")

    assert (tmp_path / "2021-05-03.csv").read_bytes() == b"original"

class _DiskFullFile:
    """일부만 쓰고 ENOSPC를 내는 파일 핸들"""

    def __init__(self, f):
        self._f = f

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self._f.close()
        return False

    def write(self, data):
        self._f.write(data[:3])
        self._f.flush()
        raise OSError(errno.ENOSPC, "No space left on device")

def test_local_storage_put_file_removes_partial_file_on_write_error(tmp_path, monkeypatch):
    """쓰기 도중 실패하면 불완전한 파일을 남기지 않음"""
    # Given
    adapter = LocalStorageAdapter(base_path=str(tmp_path))
    real_open = open
    monkeypatch.setattr(
        "infra.adapters.storage.local_storage_adapter.open",
        lambda path, mode: _DiskFullFile(real_open(path, mode)),
        raising=False
    )

    # When
    with pytest.raises(OSError):
        adapter.put_file("2021-05-04.csv", b"header,row\n")

    # Then
    assert not (tmp_path / "2021-05-04.csv").exists()
    assert adapter.path_exists("2021-05-04.csv") is False
