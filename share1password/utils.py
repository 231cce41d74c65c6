import os
import tempfile
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Iterator


@contextmanager
def scoped_tempfile(content: str) -> Iterator[Path]:
    """Write `content` to a fresh temporary file, removed when the block exits."""
    fd, name = tempfile.mkstemp()
    path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        yield path
    finally:
        path.unlink(missing_ok=True)


def item_title(directory: str, today: date) -> str:
    return f"[{directory}] - {today:%d.%m.%Y}"
