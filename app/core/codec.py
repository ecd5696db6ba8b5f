# app/core/codec.py
"""
Codificación de las colecciones de una landing (características, horarios,
testimonios, métodos de pago, productos y galería).

En base de datos cada colección es un texto JSON con un arreglo. Al leer, el
valor puede llegar como texto o ya como lista; `classify` resuelve esa
ambigüedad una sola vez.
"""
import json
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Union

from pydantic import BaseModel

from app.core.exceptions import MalformedCollectionError

EMPTY = "[]"


@dataclass(frozen=True)
class Raw:
    """Colección en su forma persistida (texto JSON)."""
    text: str


@dataclass(frozen=True)
class Structured:
    """Colección ya estructurada."""
    items: List[Any]


def classify(value: Any, field: Optional[str] = None) -> Union[Raw, Structured]:
    if value is None:
        return Structured([])
    if isinstance(value, (Raw, Structured)):
        return value
    if isinstance(value, str):
        return Raw(value)
    if isinstance(value, (list, tuple)):
        return Structured(list(value))
    raise MalformedCollectionError(field)


def _plain(item: Any) -> Any:
    if isinstance(item, BaseModel):
        # Los subcampos opcionales ausentes (o en null) siguen ausentes
        return item.model_dump(exclude_unset=True, exclude_none=True)
    return item


def decode(value: Any, field: Optional[str] = None) -> List[Any]:
    stored = classify(value, field)
    if isinstance(stored, Structured):
        return list(stored.items)

    if not stored.text.strip():
        return []
    try:
        parsed = json.loads(stored.text)
    except ValueError as e:
        raise MalformedCollectionError(field) from e
    if not isinstance(parsed, list):
        raise MalformedCollectionError(field)
    return parsed


def encode(value: Optional[Union[str, Sequence[Any]]], field: Optional[str] = None) -> str:
    if value is None:
        return EMPTY
    items = decode(value, field)
    try:
        return json.dumps([_plain(item) for item in items], ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise MalformedCollectionError(field) from e
