"""File-based storage implementation."""

import json
import logging
import os
from datetime import datetime

from core.config import DEFAULT_CONFIG_FILE, DEFAULT_SESSIONS_DIR
from core.interfaces import Storage
from core.models import AppConfig, record_from_dict

logger = logging.getLogger(__name__)


def is_session_date(value: str) -> bool:
    """True for a YYYY-MM-DD folder name."""
    try:
        datetime.strptime(value, '%Y-%m-%d')
    except (TypeError, ValueError):
        return False
    return True


class FileStorage(Storage):
    """Stores preferences in a JSON config file and sessions in dated folders.

    Session files live at <sessions_dir>/<YYYY-MM-DD>/<kind>_<HH-MM-SS>.json.
    """

    def __init__(self, config_file: str = None, sessions_dir: str = None):
        self.config_file = config_file or DEFAULT_CONFIG_FILE
        self.sessions_dir = sessions_dir or DEFAULT_SESSIONS_DIR

    def load_config(self) -> AppConfig:
        if not os.path.exists(self.config_file):
            return AppConfig()
        try:
            with open(self.config_file, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load config (using defaults): {e}")
            return AppConfig()
        if not isinstance(data, dict):
            logger.warning(f"Config at {self.config_file} is not an object, using defaults")
            return AppConfig()
        return AppConfig.from_dict(data)

    def save_config(self, config: AppConfig) -> None:
        os.makedirs(os.path.dirname(os.path.abspath(self.config_file)), exist_ok=True)
        with open(self.config_file, 'w') as f:
            json.dump(config.to_dict(), f, indent=2)

    def _get_session_file(self, kind: str, now: datetime) -> str:
        """Get a free file path for a record saved at `now`."""
        date_dir = os.path.join(self.sessions_dir, now.strftime('%Y-%m-%d'))
        os.makedirs(date_dir, exist_ok=True)
        base = f"{kind}_{now.strftime('%H-%M-%S')}"
        path = os.path.join(date_dir, f"{base}.json")
        suffix = 1
        while os.path.exists(path):
            path = os.path.join(date_dir, f"{base}_{suffix}.json")
            suffix += 1
        return path

    def save_session(self, record) -> str:
        path = self._get_session_file(record.kind, datetime.now())
        with open(path, 'w') as f:
            json.dump(record.to_dict(), f, indent=2)
        logger.info(f"Session saved to: {path}")
        return path

    def list_sessions(self, date: str = None) -> list:
        if date is not None and not is_session_date(date):
            logger.warning(f"Ignoring invalid session date: {date!r}")
            return []
        if not os.path.isdir(self.sessions_dir):
            return []
        if date:
            dates = [date]
        else:
            dates = sorted(d for d in os.listdir(self.sessions_dir) if is_session_date(d))
        sessions = []
        for day in dates:
            day_dir = os.path.join(self.sessions_dir, day)
            if not os.path.isdir(day_dir):
                continue
            for filename in sorted(os.listdir(day_dir)):
                if not filename.endswith('.json'):
                    continue
                try:
                    with open(os.path.join(day_dir, filename), 'r') as f:
                        sessions.append(record_from_dict(json.load(f)))
                except (OSError, ValueError, KeyError, AttributeError) as e:
                    logger.warning(f"Skipping unreadable session file {filename}: {e}")
        sessions.sort(key=lambda s: s.timestamp or '', reverse=True)
        return sessions
