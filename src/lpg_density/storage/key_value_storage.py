"""
Key-Value хранилища для сохранения состояния дашборда.

Определяет минимальный интерфейс KeyValueStorage (read/write строк по ключу)
и две реализации: InMemoryStorage для тестов и встраивания, JsonFileStorage
для хранения на диске (один файл на ключ).
"""

from __future__ import annotations

import os
import re
import tempfile
import threading
from pathlib import Path
from typing import Dict, Optional, Protocol, Union, runtime_checkable


class StorageError(Exception):
    """Ошибка backend-хранилища (недоступно, превышена квота)."""


@runtime_checkable
class KeyValueStorage(Protocol):
    """Интерфейс хранилища строковых значений по ключу."""

    def read(self, key: str) -> Optional[str]:
        """Прочитать значение или None, если ключа нет."""
        ...

    def write(self, key: str, value: str) -> None:
        """Записать значение целиком. Может выбросить StorageError или OSError."""
        ...


class InMemoryStorage:
    """
    Хранилище в памяти процесса.

    Опционально ограничивает суммарный размер значений в байтах (UTF-8),
    имитируя квоту браузерного localStorage.
    """

    def __init__(self, quota_bytes: Optional[int] = None):
        """
        Инициализация хранилища.

        Args:
            quota_bytes: Максимальный суммарный размер значений, None - без ограничений
        """
        self._storage: Dict[str, str] = {}
        self._lock = threading.RLock()
        self.quota_bytes = quota_bytes

    def read(self, key: str) -> Optional[str]:
        with self._lock:
            return self._storage.get(key)

    def write(self, key: str, value: str) -> None:
        """
        Сохранить значение.

        Raises:
            StorageError: Если превышена квота
        """
        with self._lock:
            if self.quota_bytes is not None:
                used = sum(
                    len(v.encode("utf-8"))
                    for k, v in self._storage.items() if k != key
                )
                if used + len(value.encode("utf-8")) > self.quota_bytes:
                    raise StorageError(
                        f"Quota of {self.quota_bytes} bytes exceeded for key '{key}'"
                    )
            self._storage[key] = value

    def delete(self, key: str) -> bool:
        """Удалить ключ. Возвращает True если ключ существовал."""
        with self._lock:
            return self._storage.pop(key, None) is not None

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._storage

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)

    def __repr__(self) -> str:
        return f"InMemoryStorage(keys={len(self)}, quota={self.quota_bytes})"


class JsonFileStorage:
    """
    Файловое хранилище: значение каждого ключа лежит в отдельном
    файле <data_dir>/<key>.json.

    Запись атомарна: данные пишутся во временный файл и заменяют
    исходный через os.replace.
    """

    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)

    def _path_for(self, key: str) -> Path:
        safe_key = re.sub(r"[^A-Za-z0-9_.-]", "_", key)
        return self.data_dir / f"{safe_key}.json"

    def read(self, key: str) -> Optional[str]:
        """
        Прочитать значение ключа.

        Raises:
            OSError: Если файл существует, но не читается
        """
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, value: str) -> None:
        """
        Записать значение ключа.

        Raises:
            OSError: Если директория недоступна для записи
        """
        self.data_dir.mkdir(parents=True, exist_ok=True)
        path = self._path_for(key)

        fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=f".{path.stem}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def __repr__(self) -> str:
        return f"JsonFileStorage(data_dir={str(self.data_dir)!r})"
