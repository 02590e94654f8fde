"""Access to the table files of a GTFS feed stored as a directory or a ZIP archive."""

from __future__ import annotations

import re
import warnings
import zipfile
from contextlib import contextmanager
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Iterator, List, Optional, Tuple

import pandas as pd

from gtfs_store.common.errors import FeedSourceError, MalformedRowError
from gtfs_store.common.logging_utils import logger

TABLE_SUFFIXES = (".txt", ".csv")

_SKIPPED_LINE = re.compile(r"Skipping line (\d+): (.*)")


def _is_table_file(name: str) -> bool:
    return name.lower().endswith(TABLE_SUFFIXES)


def candidate_filenames(table_name: str, filename: str) -> List[str]:
    """Filenames a table may be stored under, in lookup order (.txt before .csv)."""
    stems = [PurePosixPath(filename).stem, table_name]
    names: List[str] = []
    for suffix in TABLE_SUFFIXES:
        for stem in stems:
            name = f"{stem}{suffix}"
            if name not in names:
                names.append(name)
    return names


def read_gtfs_csv(
    handle,
    table_name: str,
    csv_options: Optional[Dict[str, Any]] = None,
) -> Tuple[pd.DataFrame, List[MalformedRowError]]:
    """
    Read a GTFS CSV file with every value kept as text.

    Lines with the wrong number of fields are skipped and reported.

    Args:
        handle: Path or binary file object
        table_name: Table the file holds, for error reporting
        csv_options: Extra pandas.read_csv arguments, already normalized

    Returns:
        Tuple of the DataFrame (empty cells as "") and warnings for skipped lines
    """
    skipped: List[MalformedRowError] = []
    read_options = {"encoding": "utf-8-sig", **(csv_options or {})}
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", pd.errors.ParserWarning)
        try:
            df = pd.read_csv(
                handle,
                dtype=str,
                keep_default_na=False,
                on_bad_lines="warn",
                **read_options,
            )
        except pd.errors.EmptyDataError:
            df = pd.DataFrame()
        except (ValueError, LookupError) as exc:
            # Decoding and parser errors, unknown encodings and invalid option values
            raise FeedSourceError(f"Could not parse {table_name}: {exc}") from exc

    for warning in caught:
        for line, reason in _SKIPPED_LINE.findall(str(warning.message)):
            skipped.append(MalformedRowError(table_name, int(line), None, None, reason.strip()))

    return df, skipped


class FeedSource:
    """A feed opened for reading. Use :func:`open_feed_source` to create one."""

    def __init__(
        self,
        path: str,
        files: Dict[str, str],
        archive: Optional[zipfile.ZipFile] = None,
        csv_options: Optional[Dict[str, Any]] = None,
    ):
        self.path = path
        self.csv_options = dict(csv_options or {})
        self._files = files
        self._archive = archive

    @property
    def filenames(self) -> List[str]:
        return sorted(self._files)

    def find(self, table_name: str, filename: str) -> Optional[str]:
        """Return the stored file name of a table, or None when the feed lacks it."""
        for name in candidate_filenames(table_name, filename):
            if name in self._files:
                return name
        return None

    def read_table(self, name: str, table_name: str) -> Tuple[pd.DataFrame, List[MalformedRowError]]:
        location = self._files[name]
        if self._archive is None:
            return read_gtfs_csv(location, table_name, self.csv_options)
        with self._archive.open(location) as handle:
            return read_gtfs_csv(handle, table_name, self.csv_options)


def _single_folder(names: List[str]) -> Optional[str]:
    folders = {PurePosixPath(n).parts[0] for n in names if len(PurePosixPath(n).parts) > 1}
    return folders.pop() if len(folders) == 1 else None


def _zip_files(archive: zipfile.ZipFile) -> Dict[str, str]:
    names = [
        n for n in archive.namelist()
        if not n.endswith("/") and not n.startswith("__MACOSX/") and _is_table_file(n)
    ]
    top_level = [n for n in names if "/" not in n]

    prefix = ""
    if not top_level:
        folder = _single_folder(names)
        if folder is not None:
            prefix = f"{folder}/"

    return {
        n[len(prefix):]: n
        for n in names
        if n.startswith(prefix) and "/" not in n[len(prefix):]
    }


def _directory_files(root: Path) -> Dict[str, str]:
    files = {p.name: str(p) for p in root.iterdir() if p.is_file() and _is_table_file(p.name)}
    if not files:
        subdirs = [p for p in root.iterdir() if p.is_dir()]
        if len(subdirs) == 1:
            return _directory_files(subdirs[0])
    return files


@contextmanager
def open_feed_source(path: str, csv_options: Optional[Dict[str, Any]] = None) -> Iterator[FeedSource]:
    """
    Open a feed directory or ZIP archive.

    Table files may sit at the top level or inside a single sub-folder.
    ``csv_options`` apply to every table read from the source.

    Raises:
        FeedSourceError: If the path does not exist or the archive cannot be read
    """
    source = Path(path)
    if not source.exists():
        raise FeedSourceError(f"Feed path does not exist: {path}")

    if source.is_dir():
        files = _directory_files(source)
        logger.debug("Feed directory opened: path=%s files=%d", path, len(files))
        yield FeedSource(str(source), files, csv_options=csv_options)
        return

    try:
        archive = zipfile.ZipFile(source)
    except (zipfile.BadZipFile, OSError) as exc:
        raise FeedSourceError(f"Could not open feed archive {path}: {exc}") from exc

    with archive:
        files = _zip_files(archive)
        logger.debug("Feed archive opened: path=%s files=%d", path, len(files))
        yield FeedSource(str(source), files, archive, csv_options=csv_options)


__all__ = [
    "FeedSource",
    "candidate_filenames",
    "open_feed_source",
    "read_gtfs_csv",
]
