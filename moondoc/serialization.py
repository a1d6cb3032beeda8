"""
Serialization of doc entries for JSON output.

Field names map one to one onto output keys. Empty optional values, false
flags and empty lists are left out wherever a renderer treats them as absent.
"""

import json
from typing import Any

from .doc_entry import ClassDocEntry, DocEntry, Field, FunctionDocEntry, TypeDocEntry
from .parser.doc_comment import OutputSource
from .parser.tags import CustomTag, DeprecatedTag, MarkerTag, ParamTag, ReturnTag


def _omit_empty(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value not in (None, False, [])}


def serialize_param(param: ParamTag) -> dict[str, Any]:
    return {
        "name": param.name.as_str(),
        "desc": param.description,
        "lua_type": param.lua_type.as_str(),
    }


def serialize_return(return_tag: ReturnTag) -> dict[str, Any]:
    return {"desc": return_tag.description, "lua_type": return_tag.lua_type.as_str()}


def serialize_marker(marker: MarkerTag) -> str:
    return marker.marker


def serialize_deprecated(deprecated: DeprecatedTag) -> dict[str, Any]:
    return _omit_empty(
        {
            "version": deprecated.version.as_str() if deprecated.version else None,
            "desc": deprecated.description or None,
        }
    )


def serialize_custom_tag(tag: CustomTag) -> dict[str, Any]:
    return {"name": tag.name.as_str(), "text": tag.text.as_str()}


def serialize_field(field: Field) -> dict[str, Any]:
    return {"name": field.name, "lua_type": field.lua_type, "desc": field.desc}


def serialize_output_source(source: OutputSource) -> dict[str, Any]:
    return {"path": source.path, "line": source.line}


def serialize_function(entry: FunctionDocEntry) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": entry.name,
        "desc": entry.desc,
        "within": entry.within,
        "params": [serialize_param(p) for p in entry.params],
        "returns": [serialize_return(r) for r in entry.returns],
        "markers": [serialize_marker(m) for m in entry.markers],
        "function_type": entry.function_type.value,
    }
    if entry.since is not None:
        data["since"] = entry.since
    if entry.deprecated is not None:
        data["deprecated"] = serialize_deprecated(entry.deprecated)
    return data


def serialize_type(entry: TypeDocEntry) -> dict[str, Any]:
    data = _omit_empty(
        {
            "name": entry.name,
            "desc": entry.desc,
            "lua_type": entry.lua_type,
            "fields": [serialize_field(f) for f in entry.fields],
            "tags": [serialize_custom_tag(t) for t in entry.tags],
            "private": entry.private,
            "ignore": entry.ignore,
        }
    )
    data["source"] = serialize_output_source(entry.output_source)
    return data


def serialize_class(entry: ClassDocEntry) -> dict[str, Any]:
    data = _omit_empty(
        {
            "name": entry.name,
            "desc": entry.desc,
            "tags": [serialize_custom_tag(t) for t in entry.tags],
            "private": entry.private,
            "ignore": entry.ignore,
        }
    )
    data["source"] = serialize_output_source(entry.output_source)
    return data


def serialize_entry(entry: DocEntry) -> dict[str, Any]:
    """Convert a doc entry to a JSON-serializable dictionary."""
    if isinstance(entry, FunctionDocEntry):
        return serialize_function(entry)
    if isinstance(entry, TypeDocEntry):
        return serialize_type(entry)
    if isinstance(entry, ClassDocEntry):
        return serialize_class(entry)
    raise TypeError(f"Not a doc entry: {type(entry).__name__}")


def entries_to_json(entries: list[DocEntry], indent: int | None = 2) -> str:
    """Serialize doc entries grouped by kind, the way renderers consume them."""
    grouped: dict[str, list[dict[str, Any]]] = {
        "classes": [],
        "functions": [],
        "types": [],
    }
    for entry in entries:
        if isinstance(entry, FunctionDocEntry):
            grouped["functions"].append(serialize_function(entry))
        elif isinstance(entry, TypeDocEntry):
            grouped["types"].append(serialize_type(entry))
        else:
            grouped["classes"].append(serialize_entry(entry))
    return json.dumps(grouped, indent=indent)
