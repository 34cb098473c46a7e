"""Plain-text implementation of ShipmentRepository.

One shipment per line, four fields separated by a single space::

    <category> <quantity> <YYYY-MM-DD> <supplier_id>

On read, blank lines and lines starting with ``#`` or ``//`` (after
leading whitespace) are comments. Lines are decoded one at a time, so a
line that is not valid UTF-8 is skipped like any other bad line.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from shipments.domain.exceptions import ParseError, StorageError, ValidationError
from shipments.domain.model.shipment import Shipment
from shipments.domain.model.store import ShipmentStore
from shipments.domain.model.validation import validate_shipment
from shipments.domain.repository.shipment_repository import (
    LoadResult,
    LoadWarning,
    ShipmentRepository,
)
from shipments.infrastructure.logging import get_logger

logger = get_logger(__name__)

ENCODING = "utf-8"
FIELD_COUNT = 4
COMMENT_PREFIXES = ("#", "//")

_INTEGER = re.compile(r"-?[0-9]+")


# --- Line codec ---------------------------------------------------------------

def encode_line(shipment: Shipment) -> str:
    return (
        f"{shipment.category} {shipment.quantity} "
        f"{shipment.expiry_date} {shipment.supplier_id}"
    )


def is_comment_or_blank(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith(COMMENT_PREFIXES)


def _parse_int(name: str, raw: str) -> int:
    # int() alone would also take "1_000", "+3" and non-ASCII digits.
    if not _INTEGER.fullmatch(raw):
        raise ParseError(f"{name} {raw!r} is not an integer")
    return int(raw)


def decode_line(line: str) -> Shipment:
    """Parse one data line.

    Raises ParseError if the line does not hold four integer/date fields
    and ValidationError if a field is out of range.
    """
    fields = line.split()
    if len(fields) != FIELD_COUNT:
        raise ParseError(f"expected {FIELD_COUNT} fields, found {len(fields)}")

    category_raw, quantity_raw, expiry_date, supplier_raw = fields
    return validate_shipment(
        _parse_int("category", category_raw),
        _parse_int("quantity", quantity_raw),
        expiry_date,
        _parse_int("supplier", supplier_raw),
    )


# --- Repository ---------------------------------------------------------------

class TextShipmentRepository(ShipmentRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- ShipmentRepository interface -----------------------------------------

    def exists(self) -> bool:
        return self._file_path.is_file()

    def load_into(self, store: ShipmentStore, replace: bool = False) -> LoadResult:
        raw_lines = self._read_raw_lines()
        if replace:
            store.clear()

        loaded = 0
        warnings: list[LoadWarning] = []
        for line_number, raw in enumerate(raw_lines, start=1):
            try:
                line = raw.decode(ENCODING)
                if is_comment_or_blank(line):
                    continue
                shipment = decode_line(line)
            except UnicodeDecodeError:
                warning = LoadWarning(line_number=line_number, reason="not valid UTF-8")
            except (ParseError, ValidationError) as exc:
                warning = LoadWarning(line_number=line_number, reason=str(exc))
            else:
                store.append(shipment)
                loaded += 1
                continue
            warnings.append(warning)
            logger.warning("Skipping %s %s", self._file_path, warning)

        logger.info(
            "Loaded %d shipments from %s (%d skipped)",
            loaded, self._file_path, len(warnings),
        )
        return LoadResult(loaded=loaded, warnings=tuple(warnings))

    def append_one(self, shipment: Shipment) -> None:
        data = (encode_line(shipment) + "\n").encode(ENCODING)
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            with self._file_path.open("a+b") as handle:
                # Start a fresh line if the last one was left unterminated.
                if handle.seek(0, os.SEEK_END) > 0:
                    handle.seek(-1, os.SEEK_END)
                    if handle.read(1) != b"\n":
                        data = b"\n" + data
                handle.write(data)
        except OSError as exc:
            raise StorageError(
                f"Cannot append to '{self._file_path}': {exc.strerror or exc}"
            ) from exc
        logger.info("Appended shipment to %s: %s", self._file_path, shipment)

    def save_all(self, store: ShipmentStore) -> int:
        text = "".join(encode_line(s) + "\n" for s in store)
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            with self._file_path.open("w", encoding=ENCODING) as handle:
                handle.write(text)
        except OSError as exc:
            raise StorageError(
                f"Cannot save to '{self._file_path}': {exc.strerror or exc}"
            ) from exc
        logger.info("Saved %d shipments to %s", len(store), self._file_path)
        return len(store)

    # --- File helpers ---------------------------------------------------------

    def _read_raw_lines(self) -> list[bytes]:
        try:
            with self._file_path.open("rb") as handle:
                return handle.read().splitlines()
        except OSError as exc:
            raise StorageError(f"Could not open file '{self._file_path}': {exc}") from exc
