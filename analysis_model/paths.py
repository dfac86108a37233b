# Path normalization: turn (directory, file name) pairs into slash-separated paths.

import posixpath
from pathlib import PurePosixPath, PureWindowsPath
from typing import Optional


def make_unix_path(file_name: str) -> str:
    """
    Return file_name with backslashes replaced by slashes and ./.. segments collapsed.

    Examples:
        >>> make_unix_path("C:\\\\work\\\\src\\\\..\\\\a.c")
        'C:/work/a.c'
        >>> make_unix_path("mod.py")
        'mod.py'
    """
    unix = file_name.replace("\\", "/")
    if not unix:
        return unix
    return posixpath.normpath(unix)


def is_absolute(file_name: str) -> bool:
    """True for POSIX absolute paths and Windows drive or UNC paths."""
    return PurePosixPath(file_name).is_absolute() or PureWindowsPath(file_name).is_absolute()


def create_absolute_path(directory: Optional[str], file_name: str) -> str:
    """
    Resolve file_name against directory.

    Absolute file names and missing directories leave file_name as is (apart
    from slash normalization). Nothing is looked up on disk.
    """
    if is_absolute(file_name) or not directory or not directory.strip():
        return make_unix_path(file_name)
    normalized_directory = make_unix_path(directory)
    if normalized_directory.endswith("/"):
        return make_unix_path(normalized_directory + file_name)
    return make_unix_path(normalized_directory + "/" + file_name)
