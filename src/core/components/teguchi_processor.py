# core/components/teguchi_processor.py
import datetime
from typing import Any, List

import pandas as pd

from core.domain.models import TeguchiDataset, TeguchiRecord, RECORD_FIELDS
from core.domain.exceptions import FetchError

# 출력 CSV 헤더. info_date는 파일명이 곧 날짜이므로 출력하지 않습니다.
EXPORT_HEADER: List[str] = [
    '証券会社名',
    'n225_sell',
    'n225_buy',
    'n225_net',
    'topix_sell',
    'topix_buy',
    'topix_net',
    'net_total',
]
EXPORT_FIELDS = RECORD_FIELDS[1:]


def parse_teguchi_records(payload: Any, date: datetime.date) -> TeguchiDataset:
    """디코딩된 JSON(list of dict)을 TeguchiDataset으로 변환합니다.

    업스트림 스키마를 신뢰하므로 값 검증은 하지 않습니다.
    키가 없거나 null인 필드는 빈 문자열로 채우고, 문자열이 아닌 값은 거부합니다.

    Args:
        payload: `response.json()` 결과.
        date: 조회 기준일.

    Returns:
        TeguchiDataset: 업스트림 순서를 유지한 데이터셋.

    Raises:
        FetchError: 최상위가 배열이 아니거나, 레코드 형태가 맞지 않는 경우.
    """
    if not isinstance(payload, list):
        raise FetchError(f"Expected a JSON array, got {type(payload).__name__}.")

    records: List[TeguchiRecord] = []
    for i, item in enumerate(payload):
        if not isinstance(item, dict):
            raise FetchError(f"Record #{i} is not a JSON object: {item!r}")

        values = {}
        for key in RECORD_FIELDS:
            value = item.get(key)
            if value is None:
                value = ''
            elif not isinstance(value, str):
                raise FetchError(f"Record #{i} field '{key}' is not a string: {value!r}")
            values[key] = value
        records.append(TeguchiRecord(**values))

    return TeguchiDataset(date=date, records=records)


def build_export_frame(records: List[TeguchiRecord]) -> pd.DataFrame:
    """레코드 리스트를 CSV 출력용 DataFrame으로 변환합니다.

    컬럼 순서: 証券会社名, n225 매도/매수/순매수, topix 매도/매수/순매수, 합계.
    행 순서는 입력 순서를 그대로 유지합니다.
    """
    rows = [[getattr(record, name) for name in EXPORT_FIELDS] for record in records]
    return pd.DataFrame(rows, columns=EXPORT_HEADER, dtype=str)
