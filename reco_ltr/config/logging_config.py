from __future__ import annotations

import json
import sys
from datetime import datetime, timezone

from loguru import logger

from reco_ltr.config.settings import Settings, get_settings


def _json_sink(message) -> None:
    record = message.record
    payload = {
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'level': record['level'].name,
        'module': record['module'],
        'function': record['function'],
        'line': record['line'],
        'message': record['message'],
    }
    if record['extra']:
        payload['extra'] = record['extra']
    sys.stdout.write(json.dumps(payload, ensure_ascii=False, default=str) + '\n')


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    logger.remove()
    if settings.log_json:
        logger.add(_json_sink, level=settings.log_level, backtrace=False, diagnose=False)
    else:
        logger.add(sys.stderr, level=settings.log_level, backtrace=False, diagnose=False)
