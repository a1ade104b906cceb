import typer
from dotenv import load_dotenv

from config import Settings, load_settings
from core.domain.exceptions import TeguchiSyncError
from core.services.teguchi_sync_service import TeguchiSyncService
from infra.adapters.storage import LocalStorageAdapter
from infra.adapters.csv_archive_adapter import CsvArchiveAdapter
from infra.adapters.j2funds_http_adapter import J2fundsHttpAdapter, create_j2funds_scraper
from infra.adapters.j2funds_date_list_adapter import J2fundsDateListAdapter


def build_sync_service(settings: Settings) -> TeguchiSyncService:
    """설정에 맞춰 어댑터를 생성하고 TeguchiSyncService에 주입합니다."""
    scraper = create_j2funds_scraper()

    storage = LocalStorageAdapter(base_path=settings.data_dir)
    archive = CsvArchiveAdapter(storage=storage, encoding=settings.encoding)
    date_adapter = J2fundsDateListAdapter(index_url=settings.index_url, scraper=scraper)
    data_adapter = J2fundsHttpAdapter(data_url=settings.data_url, scraper=scraper)

    return TeguchiSyncService(
        date_port=date_adapter,
        data_port=data_adapter,
        archive=archive,
        chronological=settings.chronological
    )


def sync():
    """
    j2funds 先物手口 일별 데이터를 data/<YYYY-MM-DD>.csv로 동기화합니다.
    """
    # 1. 환경 변수 로드
    load_dotenv()

    try:
        # 2. 설정 및 의존성 조립
        settings = load_settings()
        typer.echo(
            f"--- [CLI] 동기화 시작 (data: {settings.data_dir}, encoding: {settings.encoding.value}) ---"
        )
        service = build_sync_service(settings)

        # 3. 루틴 실행 (첫 오류에서 전체 중단)
        result = service.execute()
    except TeguchiSyncError as e:
        typer.echo(f"🚨 [CLI] 동기화 실패: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"--- [CLI] 동기화 완료. 수집: {result.fetch_count}, 건너뜀: {len(result.skipped)} ---")
