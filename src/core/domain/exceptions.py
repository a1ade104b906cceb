"""
동기화 루틴에서 사용하는 예외 계층.

모든 예외는 치명적(fatal)으로 취급되며, 최상위 커맨드가 실행 전체를 중단합니다.
"""


class TeguchiSyncError(Exception):
    """동기화 실패의 기본 예외."""


class ConfigError(TeguchiSyncError):
    """환경 변수 설정 값이 잘못된 경우."""


class DateDiscoveryError(TeguchiSyncError):
    """날짜 목록 페이지 조회 또는 파싱 실패."""


class FetchError(TeguchiSyncError):
    """일별 데이터 조회(HTTP/JSON) 실패."""


class ArchiveError(TeguchiSyncError):
    """로컬 아카이브 디렉토리/파일 확인 실패."""


class ExportError(TeguchiSyncError):
    """CSV 파일 생성 또는 쓰기 실패."""
