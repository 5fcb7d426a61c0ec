from __future__ import annotations

from dataclasses import asdict, is_dataclass
from typing import Any, Iterable

from flask import request

from ..core.exceptions import ValidationError


def read_json_body() -> dict:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def rows_to_json(rows: Iterable[Any]) -> list[dict]:
    return [asdict(r) if is_dataclass(r) else dict(r) for r in rows]
