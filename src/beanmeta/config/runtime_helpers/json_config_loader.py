"""JSON defaults file loading utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from ..errors import ConfigurationError


class JsonConfigLoader:
    """Loads flat ``{"NAME": value}`` JSON objects as string defaults."""

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Load configuration defaults from a JSON file.

        Returns an empty dict when the file does not exist.

        Raises:
            ConfigurationError: If the file cannot be read, is not valid JSON,
                or maps a name to a nested structure
        """
        if not path.exists():
            return {}

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError.invalid_format(str(path), "<unparseable>", "a JSON object") from exc
        except OSError as exc:
            raise ConfigurationError.load_failed("JSON config", str(path)) from exc

        if not isinstance(payload, dict):
            raise ConfigurationError(f"JSON config {path} must contain an object at the top level")

        return JsonConfigLoader._normalize_values(payload, path)

    @staticmethod
    def _normalize_values(payload: Dict[str, Any], path: Path) -> Dict[str, str]:
        normalized: Dict[str, str] = {}
        for key, value in payload.items():
            if isinstance(value, (dict, list)):
                raise ConfigurationError(f"JSON config {path} must map names to scalar values (problematic key: {key})")
            if value is None:
                normalized[str(key)] = ""
            elif isinstance(value, bool):
                normalized[str(key)] = "true" if value else "false"
            else:
                normalized[str(key)] = str(value)
        return normalized
