# infra/adapters/j2funds_http_adapter.py
import datetime
from typing import Optional

import cloudscraper
import requests.exceptions
from cloudscraper.exceptions import CloudflareException

from core.ports.teguchi_data_port import TeguchiDataPort
from core.domain.models import TeguchiDataset, format_date
from core.domain.exceptions import FetchError
from core.components.teguchi_processor import parse_teguchi_records

DEFAULT_DATA_URL = 'http://j2funds.info/invest/func/futures/_get_futures_daily_data.php'
DOCUMENT_NAME = 'daily.php'


def create_j2funds_scraper() -> cloudscraper.CloudScraper:
    """j2funds 요청용 CloudScraper 세션을 생성합니다."""
    scraper = cloudscraper.create_scraper()
    scraper.headers.update({
        'Referer': 'http://j2funds.info/invest/contents/futures/daily.php',
        'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
    })
    return scraper


class J2fundsHttpAdapter(TeguchiDataPort):
    """TeguchiDataPort의 구현체 (Adapter).

    j2funds 데이터 엔드포인트에 form POST를 보내 하루치 JSON 배열을 가져옵니다.
    재시도는 하지 않으며, 요청 간 대기(throttle)는 호출 측 책임입니다.

    Attributes:
        scraper (cloudscraper.CloudScraper): CloudScraper 인스턴스
        data_url (str): 데이터 조회 URL
    """

    def __init__(self, data_url: str = DEFAULT_DATA_URL, scraper: Optional[cloudscraper.CloudScraper] = None):
        """J2fundsHttpAdapter 초기화.

        Args:
            data_url: 데이터 조회 URL
            scraper: 주입할 세션 (None이면 새로 생성)
        """
        super().__init__()
        self.data_url = data_url
        self.scraper = scraper if scraper is not None else create_j2funds_scraper()

    def _create_form_params(self, date: datetime.date) -> dict:
        """데이터 조회 POST 요청의 form 페이로드를 생성합니다."""
        return {
            'file_name': DOCUMENT_NAME,
            'search_key': format_date(date),
        }

    def fetch_daily_data(self, date: datetime.date) -> TeguchiDataset:
        """지정된 날짜의 증권사별 수급 데이터를 가져옵니다.

        Args:
            date: 대상 날짜

        Returns:
            업스트림 순서를 유지한 TeguchiDataset

        Raises:
            FetchError: HTTP 실패, 2xx 이외의 응답, JSON 디코딩 실패 시
        """
        payload = self._create_form_params(date)

        print(f"  [Adapter:J2fundsHttp] Fetching daily data for {payload['search_key']}")

        try:
            response = self.scraper.post(self.data_url, data=payload)
            response.raise_for_status()
        except (requests.exceptions.RequestException, CloudflareException) as e:
            raise FetchError(f"Data request failed for {payload['search_key']}: {e}") from e

        try:
            raw = response.json()
        except ValueError as e:
            raise FetchError(f"Invalid JSON response for {payload['search_key']}: {e}") from e

        return parse_teguchi_records(raw, date)
