from __future__ import annotations

import json
from typing import Any, List, NoReturn

from quiz_author.errors import DecodeError
from quiz_author.ingestion.markers import UTF8_BOM


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_json(text: str) -> List[Any]:
    """
    Decode JSON-mode input into a list of record payloads.

    An array is returned as decoded; any other value is wrapped in a
    one-element list. Payload fields are not validated here; the question bank
    validates them on insert.
    """
    if text.startswith(UTF8_BOM):
        text = text[1:]
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise DecodeError(
            f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            lineno=exc.lineno,
            colno=exc.colno,
        ) from exc
    except ValueError as exc:
        raise DecodeError(f"Invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise DecodeError("Invalid JSON: nesting too deep") from exc
    return data if isinstance(data, list) else [data]
