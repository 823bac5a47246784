import os
import re
from datetime import datetime, timezone


LOG_PATH_ENV = "PERMTREE_LOG_PATH"


def _log_path():
    return os.environ.get(LOG_PATH_ENV) or None


def _sanitize(text):
    value = str(text)
    value = re.sub(r"\s+", " ", value).strip()
    return value


def log_event(component: str, message: str) -> None:
    path = _log_path()
    if path is None:
        return
    line = (
        f"{datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')} "
        f"[{_sanitize(component)}] {_sanitize(message)}"
    )
    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(line + "\n")
    except OSError:
        return
