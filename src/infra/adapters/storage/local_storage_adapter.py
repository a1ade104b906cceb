"""
로컬 파일 시스템 저장소 구현

StoragePort를 구현하여 로컬 파일 시스템에 데이터를 저장합니다.
"""
import os
from pathlib import Path

from core.ports.storage_port import StoragePort

DIRECTORY_MODE = 0o755


class LocalStorageAdapter(StoragePort):
    """로컬 파일 시스템 저장소 Adapter.

    StoragePort를 구현하여 로컬 파일 시스템에 데이터를 저장합니다.
    오류는 삼키지 않고 그대로 호출 측으로 전달합니다.

    Attributes:
        base_path (Path): 기본 저장 경로
    """

    def __init__(self, base_path: str = "data"):
        """LocalStorageAdapter 초기화.

        기본 경로는 실제 사용 시점(ensure_directory)에 생성합니다.

        Args:
            base_path: 기본 저장 경로 (기본값: "data", 작업 디렉토리 기준)
        """
        self.base_path = Path(base_path)

    def _resolve(self, path: str) -> Path:
        return self.base_path / path if path else self.base_path

    def full_path(self, path: str) -> str:
        return str(self._resolve(path).absolute())

    def put_file(self, path: str, data: bytes) -> None:
        """바이트 데이터를 새 파일로 저장합니다 (배타적 생성).

        Args:
            path: 저장 경로 (base_path 상대 경로)
            data: 저장할 데이터
        """
        full_path = self._resolve(path)
        with open(full_path, "xb") as f:
            try:
                f.write(data)
            except OSError:
                # 불완전한 파일이 남으면 다음 실행에서 수집 완료로 오인됨
                full_path.unlink()
                raise
        print(f"[LocalStorage] ✅ 파일 저장: {path} ({len(data)} bytes)")

    def path_exists(self, path: str) -> bool:
        """경로가 존재하는지 확인합니다.

        '파일 없음'만 False로 처리하고, 권한 오류 등은 OSError로 전달합니다.

        Args:
            path: 확인할 경로 (base_path 상대 경로)

        Returns:
            존재 여부
        """
        try:
            os.stat(self._resolve(path))
        except FileNotFoundError:
            return False
        return True

    def ensure_directory(self, path: str) -> bool:
        """디렉토리가 없으면 생성합니다 (권한 0755).

        Args:
            path: 생성할 디렉토리 경로 (base_path 상대 경로, ""이면 기본 경로)

        Returns:
            새로 생성했으면 True, 이미 존재하면 False
        """
        full_path = self._resolve(path)
        if self.path_exists(path):
            return False
        full_path.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
        return True
