from abc import ABC, abstractmethod
import datetime
from core.domain.models import TeguchiDataset


class TeguchiDataPort(ABC):
    """일별 선물 수급(手口) 데이터 수집을 위한 포트 인터페이스."""

    @abstractmethod
    def fetch_daily_data(self, date: datetime.date) -> TeguchiDataset:
        """지정된 날짜의 수급 데이터를 가져옵니다.

        Args:
            date (datetime.date): 대상 날짜.

        Returns:
            TeguchiDataset: 업스트림 순서를 유지한 데이터셋.

        Raises:
            FetchError: HTTP 요청 또는 JSON 디코딩에 실패한 경우.
        """
        pass
