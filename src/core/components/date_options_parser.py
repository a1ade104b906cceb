# core/components/date_options_parser.py
import datetime
from typing import List, Union

from bs4 import BeautifulSoup

from core.domain.models import parse_date
from core.domain.exceptions import DateDiscoveryError

DATE_SELECT_SELECTOR = "select[name='search_key']"


def parse_date_options(html: Union[str, bytes]) -> List[datetime.date]:
    """j2funds 일별 페이지 HTML에서 조회 가능한 날짜 목록을 추출합니다.

    이 함수는 순수(pure) 로직 컴포넌트입니다.
    `<select name="search_key">`의 `<option value="YYYY-MM-DD">` 값을 페이지에
    나타난 순서 그대로 반환합니다.

    Args:
        html: 일별 페이지 HTML (str 또는 bytes).

    Returns:
        List[datetime.date]: 페이지 순서의 날짜 목록.

    Raises:
        DateDiscoveryError: 날짜 선택 컨트롤이 없거나, 날짜 형식이 아닌 값이 있는 경우.
    """
    soup = BeautifulSoup(html, "html.parser")
    select = soup.select_one(DATE_SELECT_SELECTOR)
    if select is None:
        raise DateDiscoveryError(f"Date select control ({DATE_SELECT_SELECTOR}) not found in page.")

    dates: List[datetime.date] = []
    for option in select.find_all("option"):
        value = (option.get("value") or "").strip()
        if not value:
            # '선택하세요' 같은 placeholder
            print(f"  [Component] ⚠️  value가 없는 option을 건너뜁니다: {option.get_text(strip=True)!r}")
            continue
        try:
            dates.append(parse_date(value))
        except ValueError as e:
            raise DateDiscoveryError(f"Invalid date option value: {value!r}") from e

    return dates
