"""Writes rendered reports to a text file, replacing earlier contents."""

from __future__ import annotations

from pathlib import Path

from shipments.domain.exceptions import StorageError
from shipments.domain.repository.report_writer import ReportWriter
from shipments.infrastructure.logging import get_logger

logger = get_logger(__name__)


class TextReportWriter(ReportWriter):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    def write(self, text: str) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            with self._file_path.open("w", encoding="utf-8") as handle:
                handle.write(text)
        except OSError as exc:
            raise StorageError(
                f"Cannot create report '{self._file_path}': {exc.strerror or exc}"
            ) from exc
        logger.info("Report written to %s", self._file_path)
