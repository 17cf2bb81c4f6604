from __future__ import annotations

import json
from typing import Any


def dumps_pretty(obj: Any) -> str:
    """
    JSON для файлов ресурсов: отступ в 2 пробела, ensure_ascii=False,
    NaN/Infinity запрещены (ValueError);
    без завершающего \\n.
    """
    return json.dumps(obj, ensure_ascii=False, indent=2, allow_nan=False)
