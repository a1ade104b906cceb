import time
import datetime
from typing import Callable, List

from core.domain.models import SyncResult, format_date
from core.ports.date_listing_port import DateListingPort
from core.ports.teguchi_data_port import TeguchiDataPort
from core.ports.archive_port import ArchivePort

# 업스트림 서버 부하를 줄이기 위한 요청 간 대기 시간 (초)
THROTTLE_SECONDS = 2.0


class TeguchiSyncService:
    """날짜 목록 조회 → 누락일 확인 → 수집 → CSV 저장을 총괄하는 오케스트레이션 서비스.

    모든 오류는 예외로 그대로 전파됩니다. 한 날짜라도 실패하면 나머지 날짜는 처리하지 않으며,
    실행 중단 여부는 최상위 커맨드가 결정합니다.

    Attributes:
        date_port (DateListingPort): 날짜 목록 조회 포트
        data_port (TeguchiDataPort): 일별 데이터 조회 포트
        archive (ArchivePort): 로컬 아카이브 포트
        throttle_seconds (float): 수집 요청 전 대기 시간
        chronological (bool): True면 발견된 날짜를 오름차순으로 정렬해 처리
    """

    def __init__(
        self,
        date_port: DateListingPort,
        data_port: TeguchiDataPort,
        archive: ArchivePort,
        throttle_seconds: float = THROTTLE_SECONDS,
        chronological: bool = False,
        sleep: Callable[[float], None] = time.sleep
    ):
        self.date_port = date_port
        self.data_port = data_port
        self.archive = archive
        self.throttle_seconds = throttle_seconds
        self.chronological = chronological
        self._sleep = sleep

    def execute(self) -> SyncResult:
        """전체 동기화 루틴을 1회 실행합니다.

        1. 아카이브 디렉토리 준비
        2. 업스트림 날짜 목록 조회 (캐시 없음, 매번 새로 조회)
        3. 날짜별: 파일이 있으면 건너뛰고, 없으면 대기 후 수집하여 저장

        Returns:
            SyncResult: 발견/저장/건너뛴 날짜 목록
        """
        print("\n=== [Service:TeguchiSync] 루틴 시작 ===")

        self.archive.prepare()

        dates: List[datetime.date] = self.date_port.list_available_dates()
        if self.chronological:
            dates = sorted(dates)

        result = SyncResult(discovered=list(dates))

        if not dates:
            print("=== [Service:TeguchiSync] ⚠️ 업스트림에 조회 가능한 날짜가 없습니다. ===")
            return result

        for date in dates:
            file_name = self.archive.entry_name(date)

            if self.archive.has_entry(date):
                print(f"  [Service:TeguchiSync] ⏭️ {file_name} already exists. skip it.")
                result.skipped.append(date)
                continue

            self._sleep(self.throttle_seconds)
            dataset = self.data_port.fetch_daily_data(date)
            self.archive.save_entry(dataset)
            print(f"  [Service:TeguchiSync] ✅ {file_name} saved. ({format_date(date)}, {len(dataset)}행)")
            result.saved.append(date)

        print(
            f"=== [Service:TeguchiSync] 완료. 발견 {len(result.discovered)}건 / "
            f"저장 {len(result.saved)}건 / 건너뜀 {len(result.skipped)}건 ==="
        )
        return result
