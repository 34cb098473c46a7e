"""Tests for writing the rendered report to disk."""

import pytest

from shipments.domain.exceptions import StorageError
from shipments.infrastructure.persistence.text_report_writer import TextReportWriter


class TestTextReportWriter:

    def test_write_replaces_previous_report(self, tmp_path):
        path = tmp_path / "report.txt"
        path.write_text("stale report\n", encoding="utf-8")

        TextReportWriter(path).write("fresh\n")

        assert path.read_text(encoding="utf-8") == "fresh\n"

    def test_unwritable_destination(self, tmp_path):
        with pytest.raises(StorageError, match="Cannot create report"):
            TextReportWriter(tmp_path).write("x")
