# infra/adapters/j2funds_date_list_adapter.py
import datetime
from typing import List, Optional

import cloudscraper
import requests.exceptions
from cloudscraper.exceptions import CloudflareException

from core.ports.date_listing_port import DateListingPort
from core.domain.exceptions import DateDiscoveryError
from core.components.date_options_parser import parse_date_options
from infra.adapters.j2funds_http_adapter import create_j2funds_scraper

DEFAULT_INDEX_URL = 'http://j2funds.info/invest/contents/futures/daily.php'


class J2fundsDateListAdapter(DateListingPort):
    """DateListingPort의 구현체 (Adapter).

    j2funds 일별 페이지를 GET으로 받아 날짜 선택 박스의 option 값을 읽습니다.
    HTML 구조에 대한 의존은 `parse_date_options`에만 있습니다.

    Attributes:
        scraper (cloudscraper.CloudScraper): CloudScraper 인스턴스
        index_url (str): 날짜 목록 페이지 URL
    """

    def __init__(self, index_url: str = DEFAULT_INDEX_URL, scraper: Optional[cloudscraper.CloudScraper] = None):
        super().__init__()
        self.index_url = index_url
        self.scraper = scraper if scraper is not None else create_j2funds_scraper()

    def list_available_dates(self) -> List[datetime.date]:
        print(f"  [Adapter:J2fundsDateList] Fetching date list: {self.index_url}")

        try:
            response = self.scraper.get(self.index_url)
            response.raise_for_status()
        except (requests.exceptions.RequestException, CloudflareException) as e:
            raise DateDiscoveryError(f"Date list request failed: {e}") from e

        dates = parse_date_options(response.content)
        print(f"  [Adapter:J2fundsDateList] ✅ {len(dates)}개 날짜 발견")
        return dates
