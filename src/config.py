"""
환경 변수(.env) 기반 실행 설정

값이 없으면 j2funds 고정 계약에 맞는 기본값을 사용합니다.
"""
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

from core.domain.models import OutputEncoding
from core.domain.exceptions import ConfigError
from infra.adapters.j2funds_http_adapter import DEFAULT_DATA_URL
from infra.adapters.j2funds_date_list_adapter import DEFAULT_INDEX_URL

DEFAULT_DATA_DIR = "data"

_TRUE_VALUES = ('1', 'true', 'yes', 'on')
_FALSE_VALUES = ('0', 'false', 'no', 'off', '')


@dataclass(frozen=True)
class Settings:
    """동기화 실행 설정.

    Attributes:
        index_url (str): 날짜 목록 페이지 URL
        data_url (str): 일별 데이터 엔드포인트 URL
        data_dir (str): 아카이브 디렉토리 (작업 디렉토리 기준)
        encoding (OutputEncoding): CSV 출력 인코딩
        chronological (bool): 날짜를 오름차순으로 정렬해 처리할지 여부
    """
    index_url: str = DEFAULT_INDEX_URL
    data_url: str = DEFAULT_DATA_URL
    data_dir: str = DEFAULT_DATA_DIR
    encoding: OutputEncoding = OutputEncoding.UTF8
    chronological: bool = False


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean (true/false), got {value!r}")


def load_settings(env: Optional[Mapping[str, str]] = None, platform: str = sys.platform) -> Settings:
    """환경 변수에서 Settings를 생성합니다.

    TEGUCHI_CSV_ENCODING이 없으면 실행 플랫폼으로 인코딩을 결정합니다 (Windows → Shift-JIS).

    Args:
        env: 환경 변수 매핑 (None이면 os.environ)
        platform: sys.platform 값

    Raises:
        ConfigError: 설정 값이 잘못된 경우
    """
    if env is None:
        env = os.environ

    encoding_name = env.get('TEGUCHI_CSV_ENCODING')
    if encoding_name:
        try:
            encoding = OutputEncoding.from_name(encoding_name)
        except ValueError as e:
            raise ConfigError(str(e)) from e
    else:
        encoding = OutputEncoding.for_platform(platform)

    return Settings(
        index_url=env.get('TEGUCHI_INDEX_URL') or DEFAULT_INDEX_URL,
        data_url=env.get('TEGUCHI_DATA_URL') or DEFAULT_DATA_URL,
        data_dir=env.get('TEGUCHI_DATA_DIR') or DEFAULT_DATA_DIR,
        encoding=encoding,
        chronological=_parse_bool('TEGUCHI_CHRONOLOGICAL', env.get('TEGUCHI_CHRONOLOGICAL', '')),
    )
