# src/namever/utils/jsonlog.py
from __future__ import annotations
import json
import logging
from datetime import datetime, timezone
from pathlib import Path

# pola z `extra=...`, które trafiają do rekordu JSON
EXTRA_FIELDS = ("event", "source", "final", "error")


class JsonLinesHandler(logging.FileHandler):
    """Dopisuje jeden obiekt JSON na linię do pliku logu."""

    def __init__(self, path: str | Path):
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        super().__init__(str(path), mode="a", encoding="utf-8")

    def format(self, record: logging.LogRecord) -> str:
        obj = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "event": getattr(record, "event", None) or record.getMessage(),
        }
        for key in EXTRA_FIELDS[1:]:
            value = getattr(record, key, None)
            if value is not None:
                obj[key] = value
        return json.dumps(obj, ensure_ascii=False)


def attach_json_log(logger: logging.Logger, path: str | Path) -> JsonLinesHandler:
    handler = JsonLinesHandler(path)
    handler.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return handler
