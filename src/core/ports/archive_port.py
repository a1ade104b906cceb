from abc import ABC, abstractmethod
import datetime
from core.domain.models import TeguchiDataset


class ArchivePort(ABC):
    """날짜별 아카이브 파일(1일 1파일)의 존재 확인 및 저장을 위한 포트 인터페이스."""

    @abstractmethod
    def prepare(self) -> None:
        """아카이브 저장 위치를 준비합니다 (실행 시작 시 1회).

        Raises:
            ArchiveError: 디렉토리 생성에 실패한 경우.
        """
        pass

    @abstractmethod
    def entry_name(self, date: datetime.date) -> str:
        """날짜에 해당하는 아카이브 파일명을 반환합니다."""
        pass

    @abstractmethod
    def has_entry(self, date: datetime.date) -> bool:
        """해당 날짜의 아카이브 파일이 이미 존재하는지 확인합니다.

        파일 내용은 검사하지 않으며, 존재 여부만으로 수집 완료를 판단합니다.

        Raises:
            ArchiveError: '파일 없음' 이외의 이유로 확인에 실패한 경우.
        """
        pass

    @abstractmethod
    def save_entry(self, dataset: TeguchiDataset) -> str:
        """데이터셋을 새 아카이브 파일로 저장합니다. 기존 파일은 덮어쓰지 않습니다.

        Returns:
            str: 저장된 파일명.

        Raises:
            ExportError: 파일 생성 또는 쓰기에 실패한 경우.
        """
        pass
