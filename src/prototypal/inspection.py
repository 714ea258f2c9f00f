"""
Object Inspection: read-only structural reports over ProtoObjects.

Answers the questions a reader usually has about a prototype-based object:
    - Which properties are its own, and which are inherited?
    - Which own properties shadow something on the chain?
    - Which names resolve to methods?
    - How deep is the chain?

IMPORTANT: Inspection never modifies the object or its prototypes.
"""

from __future__ import annotations

import types
from dataclasses import dataclass, field
from typing import List

from prototypal.prototype import ProtoObject, get_prototype_of, own_keys, own_properties


@dataclass
class ObjectReport:
    """Summary of one object and its prototype chain."""

    own_keys: List[str] = field(default_factory=list)
    inherited_keys: List[str] = field(default_factory=list)
    shadowed_keys: List[str] = field(default_factory=list)
    method_names: List[str] = field(default_factory=list)
    chain_depth: int = 0


def prototype_chain(obj: ProtoObject) -> List[ProtoObject]:
    """Ancestors of obj, nearest prototype first. obj itself is excluded."""
    chain: List[ProtoObject] = []
    node = get_prototype_of(obj)
    while node is not None:
        chain.append(node)
        node = get_prototype_of(node)
    return chain


def analyze_object(obj: ProtoObject) -> ObjectReport:
    """
    Build an ObjectReport for obj.

    A key is inherited if some prototype defines it and obj does not.
    A key is shadowed if obj defines it and some prototype does too.
    Method names are resolved the way attribute lookup would resolve them.
    """
    chain = prototype_chain(obj)
    own = own_keys(obj)
    own_set = set(own)

    inherited: List[str] = []
    shadowed: List[str] = []
    resolved = own_properties(obj)
    for ancestor in chain:
        for key, value in own_properties(ancestor).items():
            if key in own_set:
                if key not in shadowed:
                    shadowed.append(key)
                continue
            if key not in resolved:
                inherited.append(key)
                resolved[key] = value

    methods = sorted(key for key, value in resolved.items() if isinstance(value, types.FunctionType))

    return ObjectReport(
        own_keys=own,
        inherited_keys=inherited,
        shadowed_keys=shadowed,
        method_names=methods,
        chain_depth=len(chain),
    )
