"""Utility functions for loading schema documents.

This module provides functions for reading schema documents from files,
directories and URLs with proper error handling. Suffix filtering
happens here so that the translator only sees eligible documents.
"""

from pathlib import Path
from typing import Iterable, Sequence
from urllib.parse import urlparse

import requests

from .codegen.core.schema import SchemaDocument
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_SCHEMA_SUFFIXES = (".avsc",)


class SchemaLoaderError(Exception):
    """Custom exception for schema loading errors."""

    pass


def has_schema_suffix(path: str | Path, suffixes: Sequence[str] = DEFAULT_SCHEMA_SUFFIXES) -> bool:
    """Check whether a path ends in one of the recognized schema suffixes."""
    name = str(path).lower()
    return any(name.endswith(suffix.lower()) for suffix in suffixes)


def document_name_for(path: str | Path) -> str:
    """Identifying name of a document: the file name without its suffix."""
    return Path(urlparse(str(path)).path).stem


def load_schema_from_file(file_path: str | Path) -> SchemaDocument:
    """Load a schema document from a local file.

    Args:
        file_path: Path to the schema file.

    Returns:
        SchemaDocument named after the file stem.

    Raises:
        FileNotFoundError: If file doesn't exist.
        SchemaLoaderError: If file cannot be read or is not UTF-8.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to load schema from file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        content = file_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        logger.error("File is not UTF-8 text: %s", file_path)
        raise SchemaLoaderError(f"File is not UTF-8 text: {file_path}") from e
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e, exc_info=True)
        raise SchemaLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.debug("Loaded schema from %s", file_path)
    return SchemaDocument(name=document_name_for(file_path), content=content)


def load_schema_from_url(url: str, timeout: int = 30) -> SchemaDocument:
    """Load a schema document from a URL.

    Args:
        url: URL to fetch the schema from.
        timeout: Request timeout in seconds.

    Returns:
        SchemaDocument named after the last path segment of the URL.

    Raises:
        SchemaLoaderError: If URL is invalid or the request fails.
    """
    logger.debug("Attempting to load schema from URL: %s", url)

    # Validate URL
    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise SchemaLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout:
        logger.error("Request timeout for URL: %s", url)
        raise SchemaLoaderError(f"Request timeout for URL: {url}")
    except requests.exceptions.ConnectionError as e:
        logger.error("Connection error for URL %s: %s", url, e)
        raise SchemaLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error %s for URL: %s", e.response.status_code, url)
        raise SchemaLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e, exc_info=True)
        raise SchemaLoaderError(f"Request error for URL {url}: {e}") from e

    response.encoding = response.encoding or "utf-8"
    logger.info("Successfully loaded schema from %s", url)
    # A leading byte order mark is not part of the JSON text
    content = response.text.removeprefix("\ufeff")
    return SchemaDocument(name=document_name_for(url), content=content)


def iter_schema_paths(
    paths: Iterable[str | Path], suffixes: Sequence[str] = DEFAULT_SCHEMA_SUFFIXES
) -> list[Path]:
    """Expand files and directories into the schema files they contain.

    Directories are searched recursively. Files named directly are kept
    only when they carry a schema suffix.

    Args:
        paths: Files and directories.
        suffixes: Recognized schema file suffixes.

    Returns:
        Sorted, de-duplicated list of schema file paths.

    Raises:
        FileNotFoundError: If a path doesn't exist.
    """
    found: set[Path] = set()
    for raw_path in paths:
        path = Path(raw_path)
        if not path.exists():
            raise FileNotFoundError(f"Path not found: {path}")

        if path.is_dir():
            for candidate in path.rglob("*"):
                if candidate.is_file() and has_schema_suffix(candidate, suffixes):
                    found.add(candidate)
        elif has_schema_suffix(path, suffixes):
            found.add(path)
        else:
            logger.debug("Ignoring %s: not a schema file", path)

    return sorted(found)


def load_schema_documents(
    paths: Iterable[str | Path], suffixes: Sequence[str] = DEFAULT_SCHEMA_SUFFIXES
) -> list[SchemaDocument]:
    """Load every schema document found under the given paths."""
    return [load_schema_from_file(path) for path in iter_schema_paths(paths, suffixes)]
