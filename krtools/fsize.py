"""List files with their mode, owner, size and access time, descending into directories."""

from __future__ import annotations

import os
import stat
import sys
import time
from collections.abc import Iterator, Sequence

try:
    import grp
    import pwd
except ImportError:  # not available on every platform
    grp = None  # type: ignore[assignment]
    pwd = None  # type: ignore[assignment]

MAX_PATH_LEN = 1024
SIZES = ("B", "K", "M", "G")

_PERMISSIONS = (
    (stat.S_IRUSR, "r"), (stat.S_IWUSR, "w"), (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"), (stat.S_IWGRP, "w"), (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"), (stat.S_IWOTH, "w"), (stat.S_IXOTH, "x"),
)


def format_mode(mode: int) -> str:
    """Render a mode like ``ls -l``: directory flag and nine permission bits."""
    kind = "d" if stat.S_ISDIR(mode) else "-"
    return kind + "".join(ch if mode & bit else "-" for bit, ch in _PERMISSIONS)


def format_size(size: int) -> str:
    """Render a byte count in the largest fitting unit, one decimal, width six."""
    unit = 0
    rem = 0
    while size >= 1024 and unit < len(SIZES) - 1:
        rem = size % 1024
        unit += 1
        size //= 1024
    return f"{size + rem / 1024:6.1f}{SIZES[unit]}"


def format_time(timestamp: float) -> str:
    """Render a timestamp as local day, month, hour and minute."""
    return time.strftime("%d %b %H:%M", time.localtime(timestamp))


def _user_name(uid: int) -> str | None:
    try:
        return pwd.getpwuid(uid).pw_name if pwd else None
    except KeyError:
        return None


def _group_name(gid: int) -> str | None:
    try:
        return grp.getgrgid(gid).gr_name if grp else None
    except KeyError:
        return None


def describe(path: str, st: os.stat_result) -> str:
    """Return the listing line for ``path``; unknown owners are left out."""
    parts = [format_mode(st.st_mode), str(st.st_nlink)]
    user = _user_name(st.st_uid)
    if user is None:
        print("Error: cannot find user", file=sys.stderr)
    else:
        parts.append(user)
    group = _group_name(st.st_gid)
    if group is None:
        print("Error: cannot find group", file=sys.stderr)
    else:
        parts.append(group)
    parts += [format_size(st.st_size), format_time(st.st_atime), path]
    return " ".join(parts)


def _dir_walk(directory: str) -> Iterator[str]:
    try:
        names = os.listdir(directory)
    except OSError:
        print(f"dir_walk: cannot open {directory}", file=sys.stderr)
        return
    for name in names:
        if len(directory) + len(name) + 2 > MAX_PATH_LEN:
            print("dir_walk: path too long", file=sys.stderr)
        else:
            yield from fsize(f"{directory}/{name}")


def fsize(path: str) -> Iterator[str]:
    """Yield listing lines for ``path``; a directory's entries come before it."""
    try:
        st = os.stat(path)
    except OSError:
        print(f"fsize: cannot access {path}", file=sys.stderr)
        return
    if stat.S_ISDIR(st.st_mode):
        yield from _dir_walk(path)
    yield describe(path, st)


def main(argv: Sequence[str] | None = None) -> int:
    """List the named paths, or the current directory."""
    args = sys.argv[1:] if argv is None else argv
    for path in args or ["."]:
        for line in fsize(path):
            print(line)
    return 0