"""Decode uploaded CSV / Excel files into raw issue records."""

from __future__ import annotations

import io
import logging
import zipfile
from pathlib import PurePath
from xml.etree.ElementTree import ParseError as XMLParseError

import pandas as pd
import xlrd
from xlrd.compdoc import CompDocError

from .config import CSV_EXTENSIONS, EXCEL_EXTENSIONS, UNSUPPORTED_FILE_MESSAGE
from .errors import FileParseError, UnsupportedFileError
from .mappers import dataframe_to_records
from .models import Record

logger = logging.getLogger(__name__)


def file_extension(file_name: str) -> str:
    return PurePath(file_name).suffix.lstrip(".").lower()


def read_csv_bytes(data: bytes) -> pd.DataFrame:
    """Header row as keys, blank lines skipped, every cell kept as text."""
    try:
        return pd.read_csv(
            io.BytesIO(data),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame()
    except (pd.errors.ParserError, UnicodeDecodeError, ValueError) as exc:
        raise FileParseError("Error parsing CSV file") from exc


def read_excel_bytes(data: bytes) -> pd.DataFrame:
    """First sheet only; missing cells become empty strings."""
    # Damaged .xls containers fail in compdoc, damaged .xlsx parts in the XML parser.
    try:
        df = pd.read_excel(io.BytesIO(data), sheet_name=0, dtype=str)
    except (
        ValueError,
        KeyError,
        OSError,
        zipfile.BadZipFile,
        xlrd.XLRDError,
        CompDocError,
        XMLParseError,
    ) as exc:
        raise FileParseError("Error parsing Excel file") from exc
    return df.fillna("")


def load_upload(file_name: str, data: bytes) -> list[Record]:
    ext = file_extension(file_name)
    if ext in CSV_EXTENSIONS:
        df = read_csv_bytes(data)
    elif ext in EXCEL_EXTENSIONS:
        df = read_excel_bytes(data)
    else:
        raise UnsupportedFileError(UNSUPPORTED_FILE_MESSAGE)
    logger.info("Decoded %s: %s row(s), %s column(s)", file_name, len(df), len(df.columns))
    return dataframe_to_records(df)
