"""Infrastructure: reading and writing whole text files.

Both helpers are UTF-8 only and map every OS-level failure to a typed
:class:`~cmdline_utils.exceptions.FileError`, keeping the original
message in ``raw_log``.
"""

from __future__ import annotations

from pathlib import Path

from cmdline_utils.exceptions import FileReadError, FileWriteError


def read_file(path: str | Path) -> str:
    """Return the contents of the file at *path*.

    A leading ``~`` expands to the current user's home directory.

    Raises
    ------
    FileReadError
        If the file is missing, unreadable, or not valid UTF-8.
    """
    location = Path(path).expanduser()
    try:
        return location.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(
            raw_log=str(exc),
            hints=[f"check that {location} exists and is a readable text file"],
        ) from exc


def write_file(
    contents: str,
    path: str | Path,
    *,
    in_current_directory: bool = True,
) -> Path:
    """Write *contents* into *path* and return the written location.

    With *in_current_directory* (the default) *path* is taken relative
    to the current working directory; otherwise it is used as given
    and should be absolute.  The write is not atomic.

    Raises
    ------
    FileWriteError
        If the file cannot be created or written.
    """
    location = Path.cwd() / path if in_current_directory else Path(path)
    try:
        location.write_text(contents, encoding="utf-8")
    except OSError as exc:
        raise FileWriteError(
            raw_log=str(exc),
            hints=[f"check that the directory of {location} exists and is writable"],
        ) from exc
    return location
