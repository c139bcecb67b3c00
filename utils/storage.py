"""
File-backed key-value storage, the widget's stand-in for browser local storage
"""
import json
import os
import tempfile
from typing import Dict, Optional
from loguru import logger


class KeyValueStorage:
    """String-to-string map persisted as a single JSON file"""

    def __init__(self, storage_file: str):
        self.storage_file = storage_file
        directory = os.path.dirname(os.path.abspath(storage_file))
        os.makedirs(directory, exist_ok=True)

    def _read_all(self) -> Dict[str, str]:
        """Read the whole map; an unreadable or corrupt file reads as empty"""
        if not os.path.exists(self.storage_file):
            return {}
        try:
            with open(self.storage_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Storage file {self.storage_file} is unreadable, treating as empty: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Storage file {self.storage_file} does not hold an object, treating as empty")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: Dict[str, str]) -> None:
        # Write to a sibling temp file and swap it in so readers never see a partial file
        directory = os.path.dirname(os.path.abspath(self.storage_file))
        fd, tmp_path = tempfile.mkstemp(prefix=".wordly-", suffix=".tmp", dir=directory)
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.storage_file)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)
        logger.debug(f"Storage: wrote key '{key}' ({len(value)} chars)")

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)
            logger.debug(f"Storage: removed key '{key}'")
