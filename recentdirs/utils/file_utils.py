"""File and path helpers: atomic write, remote detection, home abbreviation."""

import os
import re
import tempfile
from pathlib import Path

# Host-qualified locations: "/ssh:host:/path", "remote:/path", "sftp://host/path", "//server/share".
# Single-letter schemes are Windows drive letters and stay local.
_REMOTE_RE = re.compile(r"^(?:/[^/:]+:|[A-Za-z][A-Za-z0-9+.\-]+:|//[^/])")


def ensure_dir(path: Path) -> Path:
    """Create directory and parents if needed. Return path."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def is_remote(path: str) -> bool:
    """True if path names a remote/network location. Never touches the filesystem."""
    return bool(_REMOTE_RE.match(path))


def abbreviate_home(path: str) -> str:
    """Replace a leading home directory with ~."""
    home = os.path.expanduser("~").rstrip(os.sep)
    if home and (path == home or path.startswith(home + os.sep)):
        return "~" + path[len(home):]
    return path


def atomic_write_text(path: Path, text: str) -> None:
    """Write text to a temp file next to path, then replace path with it."""
    path = Path(path)
    ensure_dir(path.parent)
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except BaseException:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise
