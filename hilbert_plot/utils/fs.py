"""File helpers for plot output and config input.

SVGs are written next to their final name as ``<name>.tmp``, fsynced and
renamed into place, so an interrupted run never leaves a truncated
drawing behind.  Output names carry a timestamp and never clobber an
earlier file.

Usage:
    from hilbert_plot.utils import fs
    out_dir = fs.ensure_dir("output")
    target = fs.timestamped_path(out_dir, "output", ".svg")
    fs.atomic_write_text(target, svg_text)
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

PathLike = Union[str, Path]

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"
TMP_SUFFIX = ".tmp"


def ensure_dir(directory: PathLike) -> Path:
    """Create *directory* (and parents) unless present; return it as a Path.

    Raises ``FileExistsError`` when the path exists but is not a directory.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def atomic_write_bytes(path: PathLike, data: bytes) -> None:
    """Replace *path* with *data* in one rename.

    Parameters
    ----------
    path : str | Path
        Destination; its parent directory is created if needed
    data : bytes
        Full file content

    Raises
    ------
    RuntimeError
        If the temporary file cannot be written or moved into place.
        The temporary file is removed and the cause chained.
    """
    target = Path(path)
    ensure_dir(target.parent)
    staging = target.with_name(target.name + TMP_SUFFIX)

    try:
        with open(staging, 'wb') as fh:
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(staging, target)
    except OSError as exc:
        staging.unlink(missing_ok=True)
        raise RuntimeError(f"Failed to write {target} atomically: {exc}") from exc


def atomic_write_text(path: PathLike, text: str, encoding: str = "utf-8") -> None:
    """Text flavour of ``atomic_write_bytes``."""
    atomic_write_bytes(path, text.encode(encoding))


def load_yaml(path: PathLike) -> Optional[Dict[str, Any]]:
    """Parse a YAML file with ``yaml.safe_load``.

    Returns None for an empty document.  A missing file raises
    ``FileNotFoundError``; a syntax error is re-raised as ``yaml.YAMLError``
    naming the file.
    """
    source = Path(path)
    if not source.is_file():
        raise FileNotFoundError(f"YAML file not found: {source}")

    text = source.read_text(encoding='utf-8')
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise yaml.YAMLError(f"Failed to parse YAML file {source}: {exc}") from exc


def timestamped_path(
    directory: PathLike,
    prefix: str,
    suffix: str,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    now: Optional[datetime] = None
) -> Path:
    """Free file name of the form ``<prefix>_<timestamp><suffix>``.

    Parameters
    ----------
    directory : str | Path
        Where the file will live (not created here)
    prefix : str
        Leading part of the name, e.g. "output"
    suffix : str
        Extension with its dot, e.g. ".svg"
    timestamp_format : str
        strftime pattern applied to *now*
    now : datetime, optional
        Defaults to the current local time

    Returns
    -------
    Path
        First of ``stem.svg``, ``stem-1.svg``, ``stem-2.svg``, ... that
        does not exist yet.
    """
    directory = Path(directory)
    stem = f"{prefix}_{(now or datetime.now()).strftime(timestamp_format)}"

    candidate = directory / f"{stem}{suffix}"
    n = 0
    while candidate.exists():
        n += 1
        candidate = directory / f"{stem}-{n}{suffix}"
    return candidate
