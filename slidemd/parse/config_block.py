"""EDN configuration block decoder.

The header of a .smd file is an EDN map literal. Keywords are flattened to
plain strings (``:slide-template`` becomes ``slide_template``) and the result
is validated against the DeckConfig schema. Semantic checks such as duplicate
template ids belong to the validator, not here.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import edn_format
from edn_format import EDNDecodeError, Keyword, Symbol
from pydantic import ValidationError

from ..errors import ConfigParseError
from ..models.presentation import DeckConfig


def _key_name(key: Any) -> str:
    if isinstance(key, (Keyword, Symbol)):
        key = key.name
    return str(key).replace("-", "_")


def _to_plain(value: Any) -> Any:
    """Convert edn_format's immutable containers and keywords to plain Python."""
    if isinstance(value, Keyword):
        return value.name
    if isinstance(value, Symbol):
        return str(value)
    if isinstance(value, Mapping):
        return {_key_name(key): _to_plain(item) for key, item in value.items()}
    if isinstance(value, (str, bytes)):
        return value
    if isinstance(value, Iterable):
        return [_to_plain(item) for item in value]
    return value


def _first_violation(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location or '<root>'}: {error.get('msg', 'invalid value')}"


def parse_config(text: str) -> DeckConfig:
    """Decode the configuration block into a DeckConfig."""
    # Unknown tagged literals (#foo ...) surface as NotImplementedError.
    try:
        raw = edn_format.loads(text)
    except (EDNDecodeError, NotImplementedError, ValueError) as exc:
        raise ConfigParseError(
            f"Invalid EDN header: {exc}", {"error": str(exc)}
        ) from exc

    data = _to_plain(raw)
    if not isinstance(data, dict):
        raise ConfigParseError(
            "Invalid EDN header: expected a map at the top level.",
            {"found": type(data).__name__},
        )

    try:
        return DeckConfig.model_validate(data)
    except ValidationError as exc:
        violation = _first_violation(exc)
        raise ConfigParseError(
            f"Invalid EDN header: {violation}", {"error": violation}
        ) from exc
