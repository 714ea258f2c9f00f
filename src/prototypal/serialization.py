"""
Serialization helpers for ProtoObjects and inspection reports.

Produces plain dict snapshots that dump cleanly to JSON and YAML. Snapshots
are one-way: methods are rendered by name, so they describe an object
rather than rebuild it.

Also reads bar options from YAML documents for create_configured_bar().
"""
from __future__ import annotations

import dataclasses
import datetime
import json
import types
from collections.abc import Mapping
from typing import Any, Dict, Optional, Set

import yaml

from prototypal.inspection import ObjectReport
from prototypal.prototype import ProtoObject, get_prototype_of, own_properties


def _value_to_data(value: Any, seen: Set[int]) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (types.FunctionType, types.MethodType)):
        return f"<method {value.__name__}>"
    if isinstance(value, ProtoObject):
        return _object_to_dict(value, seen)
    if isinstance(value, Mapping):
        return {str(k): _value_to_data(v, seen) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_value_to_data(v, seen) for v in value]
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return repr(value)


def _object_to_dict(obj: ProtoObject, seen: Set[int]) -> Any:
    if id(obj) in seen:
        return "<circular>"
    seen = seen | {id(obj)}
    prototype = get_prototype_of(obj)
    return {
        "properties": {str(k): _value_to_data(v, seen) for k, v in own_properties(obj).items()},
        "prototype": None if prototype is None else _object_to_dict(prototype, seen),
    }


def object_to_dict(obj: ProtoObject) -> Dict[str, Any]:
    """Snapshot obj's own properties and, recursively, its prototype chain."""
    return _object_to_dict(obj, set())


def object_to_json(obj: ProtoObject) -> str:
    return json.dumps(object_to_dict(obj), sort_keys=True)


def object_to_yaml(obj: ProtoObject) -> str:
    return yaml.safe_dump(object_to_dict(obj))


def report_to_dict(report: ObjectReport) -> Dict[str, Any]:
    return dataclasses.asdict(report)


def report_to_json(report: ObjectReport) -> str:
    return json.dumps(report_to_dict(report), sort_keys=True)


def report_to_yaml(report: ObjectReport) -> str:
    return yaml.safe_dump(report_to_dict(report))


def options_from_yaml(text: str) -> Optional[Dict[str, Any]]:
    """
    Parse bar options from a YAML document.

    An empty document yields None (no options). Options become property
    names, so the top level must be a mapping with string keys.

    Raises:
        TypeError: If the document is not a mapping, or a key is not a string
    """
    data = yaml.safe_load(text)
    if data is None:
        return None
    if not isinstance(data, dict):
        raise TypeError(f"Bar options must be a mapping, got {type(data).__name__}")
    bad_keys = [key for key in data if not isinstance(key, str)]
    if bad_keys:
        raise TypeError(f"Bar option names must be strings, got {bad_keys!r}")
    return data
