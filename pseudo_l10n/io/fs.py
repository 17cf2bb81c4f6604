from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Union

from ..errors import FileReadError, FileWriteError
from ..jsonic import dumps_pretty

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _reject_constant(name: str) -> Any:
    # NaN, Infinity и -Infinity не входят в JSON
    raise ValueError(f"non-standard constant {name!r}")


def read_json(path: PathLike) -> Any:
    """
    Читает JSON-документ в UTF-8.

    Raises:
        FileReadError: Файл отсутствует, не читается или не является валидным JSON
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path, str(e)) from e
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        # JSONDecodeError — подкласс ValueError
        raise FileReadError(path, f"invalid JSON: {e}") from e
    logger.debug("Read %d characters of JSON from %s", len(text), path)
    return data


def write_json(path: PathLike, data: Any) -> Path:
    """
    Записывает JSON (UTF-8, отступ 2 пробела), создавая недостающие каталоги.

    Сначала пишется временный файл рядом с целевым, затем он атомарно
    подменяет целевой — недописанный результат на диске не остаётся.

    Raises:
        FileWriteError: Данные не сериализуются в JSON, не удалось создать каталог или записать файл
    """
    path = Path(path)
    try:
        text = dumps_pretty(data)
    except (TypeError, ValueError) as e:
        raise FileWriteError(path, f"cannot serialize to JSON: {e}") from e
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tmp.open("w", encoding="utf-8") as f:
            f.write(text)
        tmp.replace(path)
    except OSError as e:
        try:
            tmp.unlink()
        except OSError:
            pass  # временного файла может и не быть
        raise FileWriteError(path, str(e)) from e
    logger.debug("Wrote %d characters of JSON to %s", len(text), path)
    return path


__all__ = ["PathLike", "read_json", "write_json"]
