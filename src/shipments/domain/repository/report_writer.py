"""Abstract destination for rendered inventory reports."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ReportWriter(ABC):

    @abstractmethod
    def write(self, text: str) -> None:
        """Store ``text`` as the current report, replacing any previous one."""
