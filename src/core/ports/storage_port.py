"""
데이터 저장을 위한 포트 인터페이스

저장 위치와 무관하게 파일을 저장하고 존재 여부를 확인할 수 있도록 추상화합니다.
"""
from abc import ABC, abstractmethod


class StoragePort(ABC):
    """
    데이터 저장을 위한 포트 인터페이스.

    성공 여부를 bool로 돌려주지 않고, 실패 시 예외를 발생시킵니다.
    (호출 측이 실행 전체를 중단할지 결정합니다.)
    """

    @abstractmethod
    def path_exists(self, path: str) -> bool:
        """
        경로가 존재하는지 확인합니다.

        Args:
            path: 확인할 경로 (상대 경로)

        Returns:
            존재 여부

        Raises:
            OSError: '파일 없음' 이외의 이유로 확인할 수 없는 경우
        """
        pass

    @abstractmethod
    def ensure_directory(self, path: str) -> bool:
        """
        디렉토리가 없으면 생성합니다.

        Args:
            path: 디렉토리 경로 (상대 경로, ""이면 기본 경로)

        Returns:
            새로 생성했으면 True, 이미 존재하면 False

        Raises:
            OSError: 생성 실패 시
        """
        pass

    @abstractmethod
    def put_file(self, path: str, data: bytes) -> None:
        """
        바이트 데이터를 새 파일로 저장합니다. 같은 경로에 파일이 있으면 실패합니다.

        Args:
            path: 저장 경로 (상대 경로)
            data: 저장할 데이터 (bytes)

        Raises:
            FileExistsError: 이미 파일이 존재하는 경우
            OSError: 파일 생성/쓰기 실패 시
        """
        pass

    @abstractmethod
    def full_path(self, path: str) -> str:
        """상대 경로에 대한 실제 위치를 반환합니다 (로그 출력용)."""
        pass
