"""Writes export payloads to disk and hands them to an optional share hook."""

import logging
import re
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from weatherdash.errors import ExportError
from weatherdash.models.common import utc_now
from weatherdash.models.weather import City

logger = logging.getLogger(__name__)

ShareHook = Callable[[Path], None]

_UNSAFE = re.compile(r"[^\w\-. ]+")


def export_filename(city: City, extension: str, now: datetime | None = None) -> str:
    """``weather_<city>_<epoch-ms>.<ext>`` with path separators stripped."""
    if now is None:
        now = utc_now()
    stamp = int(now.timestamp() * 1000)
    safe_name = _UNSAFE.sub("_", city.name)
    return f"weather_{safe_name}_{stamp}.{extension}"


class ExportWriter:
    def __init__(self, export_dir: str | Path, share: ShareHook | None = None):
        self.export_dir = Path(export_dir)
        self.share = share

    def write(self, filename: str, payload: str) -> Path:
        """Write ``payload`` as UTF-8 and share it if a hook is set.

        Any OS or share failure is raised as ExportError.
        """
        path = self.export_dir / filename
        try:
            self.export_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise ExportError(f"Failed to export {filename}: {e}") from e
        logger.info("Exported %s (%d bytes)", path, len(payload.encode("utf-8")))

        if self.share is not None:
            try:
                self.share(path)
            except Exception as e:
                raise ExportError(f"Failed to share {filename}: {e}") from e
        return path
