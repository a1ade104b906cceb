from abc import ABC, abstractmethod
import datetime
from typing import List


class DateListingPort(ABC):
    """업스트림에 공개된 날짜 목록 조회를 위한 포트 인터페이스."""

    @abstractmethod
    def list_available_dates(self) -> List[datetime.date]:
        """업스트림에서 조회 가능한 날짜 목록을 가져옵니다.

        Returns:
            List[datetime.date]: 업스트림 페이지에 표시된 순서 그대로의 날짜 목록.
                시간순 정렬은 보장되지 않습니다.

        Raises:
            DateDiscoveryError: 조회 또는 파싱에 실패한 경우.
        """
        pass
