# storefront/domain/codec.py
"""
Content payload codec.

Section content can reach us either as an already-structured mapping or as
JSON text (legacy rows, form posts, double-encoded writes). Every read goes
through ``decode`` so the rest of the code only ever sees a plain ``dict``.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Dict, NamedTuple, Union

from storefront.domain.exceptions import DecodeError

logger = logging.getLogger(__name__)

# JSON text wrapped in JSON text more than this many times is rejected
MAX_ENCODING_DEPTH = 3


class Unparsable(NamedTuple):
    """Tagged result for a payload that does not normalize to a mapping."""

    raw: Any
    reason: str


def encode(value: Mapping[str, Any]) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _normalize(raw: Any) -> Dict[str, Any]:
    value = raw

    for _ in range(MAX_ENCODING_DEPTH + 1):
        if isinstance(value, Mapping):
            return dict(value)

        if isinstance(value, (bytes, bytearray)):
            try:
                value = value.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise DecodeError("Content is not valid UTF-8") from exc

        if not isinstance(value, str):
            raise DecodeError(
                f"Content must be a mapping, got {type(value).__name__}"
            )

        try:
            value = json.loads(value)
        except ValueError as exc:
            raise DecodeError(f"Content is not valid JSON: {exc}") from exc

    raise DecodeError("Content is encoded too many times")


def decode(raw: Any) -> Union[Dict[str, Any], Unparsable]:
    """
    Normalize a persisted or submitted payload to a dict.

    Never raises: failures come back as ``Unparsable`` so a single bad
    payload cannot take down the caller.
    """
    try:
        return _normalize(raw)
    except DecodeError as exc:
        logger.warning("Unparsable section content: %s", exc)
        return Unparsable(raw=raw, reason=str(exc))


def is_unparsable(value: Any) -> bool:
    return isinstance(value, Unparsable)
