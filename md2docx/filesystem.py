"""Filesystem helpers for md2docx."""

from __future__ import annotations

import os
import re
import stat
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO, TextIO

from .constants import (
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_OUTPUT_NAME,
    DOCX_EXTENSION,
    MARKDOWN_EXTENSIONS,
)
from .exceptions import FileReadError, InvalidFileTypeError

MAX_FILE_SIZE_ENV_VAR = "MD2DOCX_MAX_FILE_SIZE"
DEFAULT_FILE_MODE = 0o644

_MARKDOWN_SUFFIX_PATTERN = re.compile(
    "(" + "|".join(re.escape(extension) for extension in MARKDOWN_EXTENSIONS) + ")$",
    re.IGNORECASE,
)


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Input size limit in bytes, from ``MD2DOCX_MAX_FILE_SIZE`` when it is set.

    Raises:
        ValueError: If the variable does not hold a positive integer.
    """
    raw_limit = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if raw_limit is None:
        return default

    try:
        limit = int(raw_limit)
    except ValueError:
        limit = 0
    if limit <= 0:
        raise ValueError(f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {raw_limit!r}.")
    return limit


def is_markdown_filename(filename: str) -> bool:
    """Check the file name suffix against the accepted Markdown extensions.

    Only the name is inspected, never the content.

    Examples:
        is_markdown_filename("NOTES.MD")  # True
        is_markdown_filename("notes.rst")  # False
    """
    return _MARKDOWN_SUFFIX_PATTERN.search(filename) is not None


def output_filename(source_name: str | None = None) -> str:
    """Derive the `.docx` file name for a converted document.

    Args:
        source_name: Name of the Markdown source, if any.

    Returns:
        str: The source name with its Markdown suffix replaced by ``.docx``, or
            the default output name when there is no source.

    Examples:
        output_filename("guide.markdown")  # "guide.docx"
        output_filename()  # "converted-document.docx"
    """
    if not source_name:
        return DEFAULT_OUTPUT_NAME
    return _MARKDOWN_SUFFIX_PATTERN.sub(DOCX_EXTENSION, Path(source_name).name)


def contains_symlink(path: Path) -> bool:
    """True when `path` or one of its ancestors is a symbolic link."""

    def is_link(candidate: Path) -> bool:
        try:
            return candidate.is_symlink()
        except OSError:
            return False

    return any(is_link(candidate) for candidate in (path, *path.parents))


def normalize_filepath(raw_path: str) -> Path:
    """Resolve and validate a Markdown input path.

    Args:
        raw_path: User-supplied path to a Markdown file (absolute or relative).

    Returns:
        Path: Absolute path to the Markdown file.

    Raises:
        InvalidFileTypeError: If the file name has an unsupported suffix.
        FileReadError: If the path does not exist, is not a regular file, or
            traverses a symlink.

    Examples:
        normalize_filepath("docs/README.md")
        normalize_filepath("~/notes.txt")
    """
    path = Path(raw_path).expanduser()

    if not is_markdown_filename(path.name):
        raise InvalidFileTypeError(path.name, MARKDOWN_EXTENSIONS)

    if contains_symlink(path):
        error_message = f"Symlinks are not supported for security reasons: {path}"
        raise FileReadError(error_message)

    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        error_message = f"{path} does not exist."
        raise FileReadError(error_message) from error
    except OSError as error:
        error_message = f"Error resolving {path}: {error}"
        raise FileReadError(error_message) from error

    if not resolved.is_file():
        error_message = f"{resolved} is not a regular file."
        raise FileReadError(error_message)

    return resolved


def check_input_file(filepath: Path, max_size: int) -> int:
    """Stat `filepath` without following links and return its size in bytes.

    Raises:
        FileReadError: If the file cannot be stat'ed, is not a regular file
            (a symlink included), or is larger than `max_size`.
    """
    try:
        file_stat = os.lstat(filepath)
    except OSError as error:
        raise FileReadError(f"Error accessing {filepath}: {error}") from error

    if stat.S_ISLNK(file_stat.st_mode):
        raise FileReadError(f"Symlinks are not supported: {filepath}.")
    if not stat.S_ISREG(file_stat.st_mode):
        raise FileReadError(f"{filepath} is not a regular file.")
    if file_stat.st_size > max_size:
        raise FileReadError(
            f"{filepath} is {file_stat.st_size} bytes, over the maximum allowed size of "
            f"{max_size} bytes."
        )
    return file_stat.st_size


def safe_read(filepath: Path) -> TextIO:
    """Open a file for reading with consistent error handling.

    Returns:
        TextIO: File handle opened for reading in UTF-8.

    Raises:
        FileReadError: If the path is missing, inaccessible, or not a file.

    Examples:
        with safe_read(Path("README.md")) as handle:
            first_line = handle.readline()
    """
    try:
        return open(filepath, "r", encoding="UTF-8")
    except (
        FileNotFoundError,
        PermissionError,
        IsADirectoryError,
        NotADirectoryError,
    ) as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise FileReadError(error_message) from error


def read_markdown(filepath: Path, max_size: int | None = None) -> str:
    """Read a Markdown file as UTF-8 text after checking its size.

    Args:
        filepath: Path to a validated Markdown file.
        max_size: Size limit in bytes; resolved with `get_max_file_size` when omitted.

    Returns:
        str: The decoded file content.

    Raises:
        FileReadError: If the file is too large, unreadable, or not valid UTF-8.
    """
    if max_size is None:
        try:
            max_size = get_max_file_size()
        except ValueError as error:
            raise FileReadError(str(error)) from error

    check_input_file(filepath, max_size)

    try:
        with safe_read(filepath) as file:
            return file.read()
    except FileReadError:
        raise
    except UnicodeDecodeError as error:
        error_message = f"Invalid UTF-8 sequence in {filepath}: {error}"
        raise FileReadError(error_message) from error
    except OSError as error:
        error_message = f"Error reading {filepath}: {error}"
        raise FileReadError(error_message) from error


def write_atomic(filepath: Path, write: Callable[[BinaryIO], None]):
    """Write a file through a temporary sibling and swap it into place.

    An existing target keeps its permission bits; a new one gets 0o644.

    Args:
        filepath: Destination path.
        write: Callback that writes the full content to the binary stream.

    Raises:
        OSError: If the temporary file cannot be written or moved into place.

    Examples:
        write_atomic(Path("out.docx"), document.save)
    """
    try:
        permissions = stat.S_IMODE(os.stat(filepath).st_mode)
    except FileNotFoundError:
        permissions = DEFAULT_FILE_MODE

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb", delete=False, dir=filepath.parent, suffix=".tmp"
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            write(tmp_file)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
            os.chmod(tmp_file.name, permissions)

        os.replace(temp_path, filepath)
    finally:
        if temp_path is not None:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                pass
