import csv
import io
import logging
from typing import List, Optional

from config.settings import CSV_DELIMITERS, CSV_ENCODINGS
from models.table_model import Table

log = logging.getLogger(__name__)


class TableServiceError(Exception):
    pass


class ParseFailure(TableServiceError):
    """Malformed, unreadable or blank source input."""


class EmptyResult(TableServiceError):
    """Parsing succeeded but produced no data rows."""


class TableService:
    """
    Turns pasted text or an uploaded file into a Table.
    - Tries several encodings for files (UTF-8, Latin-1).
    - Detects the delimiter from the first non-blank line.
    - Skips fully blank records, pads short rows with "".
    """

    @staticmethod
    def read_file(path: str, has_header: bool = True) -> Table:
        if not path:
            raise ParseFailure("No file selected.")

        text = None
        for enc in CSV_ENCODINGS:
            try:
                with open(path, "r", encoding=enc, newline="") as f:
                    text = f.read()
                log.debug("Read %s with encoding %s", path, enc)
                break
            except UnicodeDecodeError:
                continue
            except OSError as e:
                raise ParseFailure(f"Error reading file: {e}") from e

        if text is None:
            raise ParseFailure("Could not decode the file (check its encoding).")
        return TableService.parse_text(text, has_header=has_header)

    @staticmethod
    def parse_text(text: str, has_header: bool = True) -> Table:
        if text is None or not text.strip():
            raise ParseFailure("Please paste some data or upload a file.")

        # CR-only and CRLF files tokenise the same as LF ones
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        delimiter = TableService.detect_delimiter(text)
        try:
            records = [
                [cell.strip() for cell in record]
                for record in csv.reader(io.StringIO(text), delimiter=delimiter, strict=True)
            ]
        except csv.Error as e:
            raise ParseFailure(f"Error parsing CSV: {e}") from e

        records = [r for r in records if any(cell for cell in r)]
        if not records:
            raise ParseFailure("Please paste some data or upload a file.")

        if has_header:
            columns = TableService._unique_columns(records[0])
            data_records = records[1:]
        else:
            width = max(len(r) for r in records)
            columns = [f"Column {i + 1}" for i in range(width)]
            data_records = records

        if not data_records:
            raise EmptyResult("No valid data found.")

        expected = len(columns)
        rows = []
        for line_no, record in enumerate(data_records, start=2 if has_header else 1):
            if len(record) > expected:
                log.warning("Record %d has %d fields, expected %d; extra fields dropped",
                            line_no, len(record), expected)
                record = record[:expected]
            elif len(record) < expected:
                record = record + [""] * (expected - len(record))
            rows.append(dict(zip(columns, record)))

        log.info("Parsed %d rows x %d columns (delimiter %r)", len(rows), expected, delimiter)
        return Table(columns=columns, rows=rows)

    @staticmethod
    def detect_delimiter(text: str) -> str:
        header_line = TableService._first_non_blank_line(text) or ""
        # Most frequent candidate wins, comma by default
        delimiter = max(CSV_DELIMITERS, key=lambda d: header_line.count(d))
        if header_line.count(delimiter) == 0:
            delimiter = ","
        return delimiter

    @staticmethod
    def _first_non_blank_line(text: str) -> Optional[str]:
        for line in text.splitlines():
            if line.strip():
                return line
        return None

    @staticmethod
    def _unique_columns(header: List[str]) -> List[str]:
        columns: List[str] = []
        for i, name in enumerate(header):
            name = name or f"Column {i + 1}"
            original = name
            suffix = 1
            while name in columns:
                suffix += 1
                name = f"{original}_{suffix}"
            columns.append(name)
        return columns
