"""
Преобразование пары файлов: исходный JSON с ресурсами -> псевдолокаль.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from ..config import Options
from ..engine import PseudoLocalizer
from .fs import PathLike, read_json, write_json

logger = logging.getLogger(__name__)


def generate_file(input_path: PathLike, output_path: PathLike, options: Options = None) -> Path:
    """
    Генерирует псевдолокализованный JSON-файл из исходного.

    Дерево целиком преобразуется в памяти до начала записи.

    Args:
        input_path: Путь к исходному JSON
        output_path: Путь к результату (недостающие каталоги создаются)
        options: PseudoConfig или частичный словарь опций

    Returns:
        Путь к записанному файлу

    Raises:
        ConfigurationError: Неверные опции
        FileReadError: Исходный файл не читается или не является JSON
        FileWriteError: Результат не удалось записать
    """
    # Опции проверяются до любых обращений к диску
    localizer = PseudoLocalizer(options)
    data = read_json(input_path)
    result = localizer.process(data)
    written = write_json(output_path, result)
    logger.info("Pseudo-locale file generated: %s", written)
    return written


async def generate_file_async(input_path: PathLike, output_path: PathLike, options: Options = None) -> Path:
    """
    Асинхронная обёртка над generate_file.

    Не добавляет параллелизма: синхронная операция выполняется
    в рабочем потоке, чтобы не блокировать цикл событий.
    """
    return await asyncio.to_thread(generate_file, input_path, output_path, options)


# Совместимые имена (camelCase API: generatePseudoLocaleSync / generatePseudoLocale)
generate_pseudo_locale_sync = generate_file
generate_pseudo_locale = generate_file_async

__all__ = [
    "generate_file",
    "generate_file_async",
    "generate_pseudo_locale_sync",
    "generate_pseudo_locale",
]
