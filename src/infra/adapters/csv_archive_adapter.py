"""날짜별 CSV 아카이브 어댑터"""

import datetime

from core.ports.archive_port import ArchivePort
from core.ports.storage_port import StoragePort
from core.domain.models import TeguchiDataset, OutputEncoding, format_date
from core.domain.exceptions import ArchiveError, ExportError
from core.components.teguchi_processor import build_export_frame


class CsvArchiveAdapter(ArchivePort):
    """ArchivePort 구현체.

    하루치 데이터를 `<YYYY-MM-DD>.csv` 파일 하나로 저장합니다.
    파일 존재 여부가 곧 수집 완료 여부이며, 이미 있는 파일은 절대 덮어쓰지 않습니다.

    Attributes:
        storage (StoragePort): 파일 저장 포트
        encoding (OutputEncoding): CSV 출력 인코딩
    """

    EXTENSION = ".csv"

    def __init__(self, storage: StoragePort, encoding: OutputEncoding = OutputEncoding.UTF8):
        """CsvArchiveAdapter 초기화.

        Args:
            storage: StoragePort 구현체
            encoding: 호출 측이 실행 환경에 맞춰 결정한 출력 인코딩
        """
        self.storage = storage
        self.encoding = encoding

    def prepare(self) -> None:
        try:
            created = self.storage.ensure_directory("")
        except OSError as e:
            raise ArchiveError(f"Failed to create data directory: {e}") from e

        if created:
            print(f"[Adapter:CsvArchive] Data dir doesn't exist. create: {self.storage.full_path('')}")

    def entry_name(self, date: datetime.date) -> str:
        return format_date(date) + self.EXTENSION

    def has_entry(self, date: datetime.date) -> bool:
        name = self.entry_name(date)
        try:
            return self.storage.path_exists(name)
        except OSError as e:
            raise ArchiveError(f"Failed to inspect {name}: {e}") from e

    def save_entry(self, dataset: TeguchiDataset) -> str:
        """데이터셋을 새 CSV 파일로 저장합니다.

        인코딩을 먼저 끝낸 뒤 배타적 생성으로 쓰기 때문에, 인코딩 불가 문자가 있으면
        파일이 만들어지지 않고 같은 이름의 파일이 있으면 실패합니다.

        Args:
            dataset: 저장할 하루치 데이터셋

        Returns:
            저장된 파일명

        Raises:
            ExportError: 파일 생성/쓰기 실패 또는 인코딩 불가 문자 포함 시
        """
        name = self.entry_name(dataset.date)
        df = build_export_frame(dataset.records)

        text = df.to_csv(header=True, index=False, lineterminator="\n")

        try:
            data = text.encode(self.encoding.value)
        except UnicodeEncodeError as e:
            raise ExportError(f"{name} contains characters not representable in {self.encoding.value}: {e}") from e

        try:
            self.storage.put_file(name, data)
        except OSError as e:
            raise ExportError(f"Failed to write {name}: {e}") from e

        return name
