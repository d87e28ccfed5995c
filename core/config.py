from __future__ import annotations
import json
from pathlib import Path

_DEFAULTS = {
    "device_id": 0x43,
    "channel": 1,
    "data_placeholder": "VV",
    "delimiter": ";",
    "headings": True,
}


def _same_type(value, default) -> bool:
    # bool is an int subclass; keep "channel": true from passing as 1
    return type(value) is type(default)


class AppConfig:
    def __init__(self, path: Path | None = None) -> None:
        self._path = path or Path.home() / ".config" / "sysextable" / "config.json"
        self.device_id: int = _DEFAULTS["device_id"]
        self.channel: int = _DEFAULTS["channel"]
        self.data_placeholder: str = _DEFAULTS["data_placeholder"]
        self.delimiter: str = _DEFAULTS["delimiter"]
        self.headings: bool = _DEFAULTS["headings"]
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text())
            if not isinstance(data, dict):
                return
            for key, default in _DEFAULTS.items():
                if key in data and _same_type(data[key], default):
                    setattr(self, key, data[key])
        except (json.JSONDecodeError, OSError):
            pass

    def save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data = {key: getattr(self, key) for key in _DEFAULTS}
        self._path.write_text(json.dumps(data, indent=2))
