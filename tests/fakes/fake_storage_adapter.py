from typing import Dict, List
from core.ports.storage_port import StoragePort

class FakeStorageAdapter(StoragePort):
    """테스트용 인메모리 스토리지 어댑터"""

    def __init__(self, existing: List[str] = None):
        self.files: Dict[str, bytes] = {name: b"" for name in (existing or [])}
        self.directories: List[str] = []

    def path_exists(self, path: str) -> bool:
        return (path in self.files) or (path in self.directories)

    def ensure_directory(self, path: str) -> bool:
        if path in self.directories:
            return False
        self.directories.append(path)
        return True

    def put_file(self, path: str, data: bytes) -> None:
        if path in self.files:
            raise FileExistsError(path)
        self.files[path] = data

    def full_path(self, path: str) -> str:
        return f"memory://{path}"
