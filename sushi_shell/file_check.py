"""File tests used by conditional expressions."""

from __future__ import annotations

import os
import re
import stat

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _stat(name: str) -> os.stat_result | None:
    try:
        return os.stat(name)
    except (OSError, ValueError):
        return None


def exists(name: str) -> bool:
    return _stat(name) is not None


def is_regular_file(name: str) -> bool:
    return os.path.isfile(name)


def is_dir(name: str) -> bool:
    return os.path.isdir(name)


def metadata_comp(left: str, right: str, op: str) -> bool:
    """Compare two files with -ef, -nt or -ot."""
    lmeta, rmeta = _stat(left), _stat(right)
    if lmeta is None and rmeta is None:
        return False
    if rmeta is None:
        return op == "-nt"
    if lmeta is None:
        return op == "-ot"

    if op == "-ef":
        return (lmeta.st_dev, lmeta.st_ino) == (rmeta.st_dev, rmeta.st_ino)
    if op == "-nt":
        return lmeta.st_mtime_ns > rmeta.st_mtime_ns
    if op == "-ot":
        return lmeta.st_mtime_ns < rmeta.st_mtime_ns
    return False


def metadata_check(name: str, op: str) -> bool:
    """Check a single file property given as a test option such as -b or -u."""
    meta = _stat(name)
    if meta is None:
        return False

    mode = meta.st_mode
    checks = {
        "-b": lambda: stat.S_ISBLK(mode),
        "-c": lambda: stat.S_ISCHR(mode),
        "-p": lambda: stat.S_ISFIFO(mode),
        "-s": lambda: meta.st_size == 0,
        "-G": lambda: os.getgid() == meta.st_gid,
        "-N": lambda: meta.st_mtime_ns > meta.st_atime_ns,
        "-O": lambda: os.getuid() == meta.st_uid,
        "-S": lambda: stat.S_ISSOCK(mode),
    }
    if op in checks:
        return bool(checks[op]())

    special_mode = (stat.S_IMODE(mode) // 0o1000) % 8
    if op == "-g":
        return (special_mode % 4) >> 1 == 1
    if op == "-k":
        return special_mode % 2 == 1
    if op == "-u":
        return special_mode // 4 == 1
    return False


def is_symlink(name: str) -> bool:
    return os.path.islink(name)


def is_readable(name: str) -> bool:
    return os.access(name, os.R_OK)


def is_executable(name: str) -> bool:
    return os.access(name, os.X_OK)


def is_writable(name: str) -> bool:
    return os.access(name, os.W_OK)


def is_tty(name: str) -> bool:
    """Return True if the name is a file descriptor number attached to a terminal."""
    if not _INT_RE.fullmatch(name):
        return False
    fd = int(name)
    if not -(2**31) <= fd < 2**31:
        return False
    try:
        return os.isatty(fd)
    except (OSError, OverflowError):
        return False