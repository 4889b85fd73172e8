"""
JSON:API compound-document codec.

Entities are pydantic models deriving from ``Resource``. The model itself is
the schema table: field aliases are the wire attribute names, fields typed as
another ``Resource`` are relationships, and the ``resource_type`` class
variable is the document ``type``.
"""

from __future__ import annotations

import types
import typing
from functools import lru_cache
from typing import Any, ClassVar, Dict, FrozenSet, List, Mapping, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import TerrakubeDecodeError

R = TypeVar("R", bound="Resource")

MEDIA_TYPE = "application/vnd.api+json"


class Resource(BaseModel):
    resource_type: ClassVar[str] = ""
    # Wire names dropped from request bodies when None or "".
    omit_empty: ClassVar[FrozenSet[str]] = frozenset()

    id: str = ""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_document(self) -> Dict[str, Any]:
        return encode_resource(self)


def _related_model(annotation: Any) -> Type[Resource] | None:
    if isinstance(annotation, type) and issubclass(annotation, Resource):
        return annotation
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        for arg in typing.get_args(annotation):
            found = _related_model(arg)
            if found is not None:
                return found
    return None


@lru_cache(maxsize=None)
def relationship_fields(model: Type[Resource]) -> Dict[str, Tuple[str, Type[Resource]]]:
    """Map field name -> (wire name, related model) for relationship fields."""
    rels: Dict[str, Tuple[str, Type[Resource]]] = {}
    for name, info in model.model_fields.items():
        related = _related_model(info.annotation)
        if related is not None:
            rels[name] = (info.alias or name, related)
    return rels


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def encode_resource(entity: Resource) -> Dict[str, Any]:
    """
    Encode an entity as a single-resource document.
    - booleans are always written, False included
    - unset optional attributes are written as null unless listed in omit_empty
    - empty id is left out so the server assigns one
    - unset relationships are left out
    """
    model = type(entity)
    if not model.resource_type:
        raise TypeError(f"{model.__name__} does not declare a resource_type")

    rels = relationship_fields(model)
    attributes = entity.model_dump(
        mode="json", by_alias=True, exclude={"id", *rels.keys()}
    )
    for wire_name in model.omit_empty:
        if wire_name in attributes and _is_empty(attributes[wire_name]):
            del attributes[wire_name]

    node: Dict[str, Any] = {"type": model.resource_type}
    if entity.id:
        node["id"] = entity.id
    node["attributes"] = attributes

    relationships: Dict[str, Any] = {}
    for field_name, (wire_name, _) in rels.items():
        related = getattr(entity, field_name)
        if related is None:
            continue
        relationships[wire_name] = {
            "data": {"type": type(related).resource_type, "id": related.id}
        }
    if relationships:
        node["relationships"] = relationships

    return {"data": node}


def _index_included(document: Mapping[str, Any]) -> Dict[Tuple[str, str], Dict[str, Any]]:
    included = document.get("included")
    if not isinstance(included, list):
        return {}
    return {
        (str(item.get("type")), str(item.get("id"))): item
        for item in included
        if isinstance(item, dict)
    }


def _decode_node(
    model: Type[R],
    node: Any,
    included: Dict[Tuple[str, str], Dict[str, Any]],
) -> R:
    if not isinstance(node, dict):
        raise TerrakubeDecodeError(
            f"Expected a resource object for {model.resource_type!r}, "
            f"got {type(node).__name__}"
        )

    node_type = node.get("type")
    if node_type != model.resource_type:
        raise TerrakubeDecodeError(
            f"Resource type mismatch: expected {model.resource_type!r}, "
            f"got {node_type!r}"
        )

    attributes = node.get("attributes") or {}
    if not isinstance(attributes, dict):
        raise TerrakubeDecodeError(
            f"Expected attributes object for {model.resource_type!r}"
        )

    rels = relationship_fields(model)
    rel_wire_names = {wire for wire, _ in rels.values()}
    # null attributes fall back to the field default
    payload: Dict[str, Any] = {
        k: v
        for k, v in attributes.items()
        if v is not None and k != "id" and k not in rel_wire_names
    }
    raw_id = node.get("id")
    payload["id"] = "" if raw_id is None else str(raw_id)

    relationships = node.get("relationships") or {}
    if isinstance(relationships, dict):
        for field_name, (wire_name, related_model) in rels.items():
            rel = relationships.get(wire_name)
            data = rel.get("data") if isinstance(rel, dict) else None
            if not isinstance(data, dict):
                continue
            key = (str(data.get("type")), str(data.get("id")))
            payload[field_name] = _decode_node(
                related_model, included.get(key, data), included
            )

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise TerrakubeDecodeError(
            f"Resource {model.resource_type!r} did not match "
            f"{model.__name__}: {exc}"
        ) from exc


def decode_one(model: Type[R], document: Any) -> R:
    if not isinstance(document, dict):
        raise TerrakubeDecodeError(
            f"Expected a JSON:API document object, got {type(document).__name__}"
        )
    data = document.get("data")
    if not isinstance(data, dict):
        raise TerrakubeDecodeError(
            "Expected a single resource under 'data', "
            f"got {type(data).__name__}"
        )
    return _decode_node(model, data, _index_included(document))


def decode_many(model: Type[R], document: Any) -> List[R]:
    if not isinstance(document, dict):
        raise TerrakubeDecodeError(
            f"Expected a JSON:API document object, got {type(document).__name__}"
        )
    data = document.get("data")
    if not isinstance(data, list):
        raise TerrakubeDecodeError(
            f"Expected a resource list under 'data', got {type(data).__name__}"
        )
    included = _index_included(document)
    return [_decode_node(model, node, included) for node in data]


__all__ = [
    "MEDIA_TYPE",
    "Resource",
    "relationship_fields",
    "encode_resource",
    "decode_one",
    "decode_many",
]
