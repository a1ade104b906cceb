from enum import Enum
from dataclasses import dataclass, field
import datetime
from typing import List

DATE_FORMAT = '%Y-%m-%d'


def format_date(date: datetime.date) -> str:
    """날짜를 j2funds 표준 문자열(YYYY-MM-DD)로 변환합니다."""
    return date.strftime(DATE_FORMAT)


def parse_date(date_str: str) -> datetime.date:
    """YYYY-MM-DD 문자열을 date로 변환합니다.

    Raises:
        ValueError: 형식이 맞지 않는 경우
    """
    return datetime.datetime.strptime(date_str, DATE_FORMAT).date()


class OutputEncoding(Enum):
    """CSV 출력 인코딩.

    Windows의 Excel은 UTF-8 CSV를 그대로 열지 못하므로 Shift-JIS(Windows-31J)를 사용합니다.
    """
    UTF8 = "utf-8"
    SHIFT_JIS = "cp932"

    @classmethod
    def for_platform(cls, platform: str) -> "OutputEncoding":
        """실행 플랫폼(sys.platform 값)에 맞는 기본 인코딩을 반환합니다."""
        if platform.startswith(('win32', 'cygwin')):
            return cls.SHIFT_JIS
        return cls.UTF8

    @classmethod
    def from_name(cls, name: str) -> "OutputEncoding":
        """설정 값('utf8', 'shiftjis' 등)을 OutputEncoding으로 변환합니다.

        Raises:
            ValueError: 지원하지 않는 인코딩 이름인 경우
        """
        normalized = name.strip().lower().replace('-', '').replace('_', '')
        if normalized in ('utf8',):
            return cls.UTF8
        if normalized in ('shiftjis', 'sjis', 'cp932', 'windows31j'):
            return cls.SHIFT_JIS
        raise ValueError(f"Unsupported encoding: {name}. Use 'utf8' or 'shiftjis'.")


@dataclass(frozen=True)
class TeguchiRecord:
    """증권사 한 곳의 일별 선물 수급(手口) 레코드.

    업스트림이 숫자가 아닌 값('-' 등)을 내려줄 수 있으므로 모든 필드는 문자열 그대로 보관합니다.

    Attributes:
        info_date (str): 데이터 기준일
        company (str): 증권사명
        n225_sell (str): 닛케이225 매도
        n225_buy (str): 닛케이225 매수
        n225_net (str): 닛케이225 순매수
        topix_sell (str): TOPIX 매도
        topix_buy (str): TOPIX 매수
        topix_net (str): TOPIX 순매수
        net_total (str): 순매수 합계
    """
    info_date: str
    company: str
    n225_sell: str
    n225_buy: str
    n225_net: str
    topix_sell: str
    topix_buy: str
    topix_net: str
    net_total: str


# JSON 키 순서 = 레코드 필드 순서
RECORD_FIELDS = (
    'info_date',
    'company',
    'n225_sell',
    'n225_buy',
    'n225_net',
    'topix_sell',
    'topix_buy',
    'topix_net',
    'net_total',
)


@dataclass
class TeguchiDataset:
    """하루치 수급 데이터와 기준일을 캡슐화하는 DTO.

    Attributes:
        date (datetime.date): 조회 기준일
        records (List[TeguchiRecord]): 업스트림이 반환한 순서 그대로의 레코드
    """
    date: datetime.date
    records: List[TeguchiRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class SyncResult:
    """한 번의 동기화 실행 결과."""
    discovered: List[datetime.date] = field(default_factory=list)
    saved: List[datetime.date] = field(default_factory=list)
    skipped: List[datetime.date] = field(default_factory=list)

    @property
    def fetch_count(self) -> int:
        return len(self.saved)
