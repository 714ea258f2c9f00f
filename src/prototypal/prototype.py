"""
Prototype Object Model

Defines the delegation-based object every idiom in this package is built on.

A ProtoObject holds:
    - Own properties (an ordered name -> value mapping)
    - A prototype (another ProtoObject, or None)

Reading an attribute looks at the object's own properties first, then walks
the prototype chain. Writing an attribute always creates or replaces an OWN
property, shadowing whatever the chain provides.

ARCHITECTURAL RULE:
    Delegation is live.
    A prototype is consulted at lookup time, never copied.
    Changing a prototype is immediately visible through every object
    that delegates to it.

METHOD BINDING:
    A plain function found by lookup (own or inherited) is bound to the
    object the lookup started from, the receiver. Functions stored in
    method tables therefore take the receiver as their first parameter,
    conventionally named ``this``.
"""

from __future__ import annotations

import types
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from prototypal.exceptions import UnboundThisError
from prototypal.logging import get_logger

logger = get_logger(__name__)

_RESERVED = frozenset({"_properties", "_prototype"})


class ProtoObject:
    """
    An object whose property lookup delegates along a prototype chain.

    Build one directly for an object literal:

        bar = ProtoObject(band="Dr. Teeth and the Electric Mayhem")

    or use create() to get an empty object delegating to a prototype.

    The class defines no public methods of its own, so any
    property name is available to user code. Reflection lives in module
    level helpers (get_prototype_of, has_own, own_keys, ...).
    """

    __slots__ = ("_properties", "_prototype")

    def __init__(self, properties: Optional[Mapping] = None, /, **kwargs: Any):
        object.__setattr__(self, "_properties", {})
        object.__setattr__(self, "_prototype", None)
        if properties is not None:
            self._properties.update(properties)
        self._properties.update(kwargs)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, i.e. for properties.
        if name in _RESERVED or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        value = _resolve(self, name)
        if isinstance(value, types.FunctionType):
            return types.MethodType(value, self)
        return value

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _RESERVED:
            raise AttributeError(f"'{name}' is reserved by ProtoObject")
        self._properties[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self._properties[name]
        except KeyError:
            raise AttributeError(f"object has no own property '{name}'") from None

    def __contains__(self, name: str) -> bool:
        # Mirrors the `in` operator of prototype languages: inherited names count.
        return any(name in node._properties for node in _chain(self))

    def __dir__(self) -> List[str]:
        return sorted({key for node in _chain(self) for key in node._properties})

    def __repr__(self) -> str:
        return f"ProtoObject({self._properties!r})"


PropertySource = Union[ProtoObject, Mapping]


def _chain(obj: ProtoObject) -> Iterator[ProtoObject]:
    """Yield obj and then each of its prototypes, nearest first."""
    node: Optional[ProtoObject] = obj
    while node is not None:
        yield node
        node = node._prototype


def _resolve(obj: ProtoObject, name: str) -> Any:
    for node in _chain(obj):
        if name in node._properties:
            return node._properties[name]
    raise AttributeError(f"'{name}' not found on object or its prototype chain")


def create(prototype: Optional[ProtoObject]) -> ProtoObject:
    """
    Return a new, empty object that delegates to ``prototype``.

    This is the classic Object.create shim: every call allocates a fresh
    object, and all of them share the same delegation target.

    Args:
        prototype: Delegation parent, or None for an object with no chain

    Returns:
        A new ProtoObject

    Raises:
        TypeError: If prototype is neither a ProtoObject nor None
    """
    if prototype is not None and not isinstance(prototype, ProtoObject):
        raise TypeError(f"Object prototype may only be a ProtoObject or None: {prototype!r}")
    obj = ProtoObject()
    object.__setattr__(obj, "_prototype", prototype)
    return obj


def get_prototype_of(obj: ProtoObject) -> Optional[ProtoObject]:
    """Return the delegation parent of obj (None at the end of the chain)."""
    return obj._prototype


def has_own(obj: ProtoObject, name: str) -> bool:
    """True if name is an own property of obj, ignoring the chain."""
    return name in obj._properties


def own_keys(obj: ProtoObject) -> List[str]:
    """Own property names in insertion order."""
    return list(obj._properties)


def own_properties(obj: ProtoObject) -> Dict[str, Any]:
    """Shallow copy of obj's own properties, functions left unbound."""
    return dict(obj._properties)


def _source_items(source: PropertySource):
    if isinstance(source, ProtoObject):
        return source._properties.items()
    if isinstance(source, Mapping):
        return source.items()
    raise TypeError(f"Cannot extend from {type(source).__name__}")


def extend(destination, *sources: Optional[PropertySource]):
    """
    Shallow-merge every source into destination and return destination.

    Semantics:
        - Sources are applied left to right; later keys win
        - Only a source's OWN properties are copied
        - Values are copied by reference (no deep copy)
        - None sources are skipped

    Args:
        destination: ProtoObject or mutable mapping, mutated in place
        *sources: ProtoObjects or mappings

    Returns:
        The same destination object
    """
    if isinstance(destination, ProtoObject):
        target = destination._properties
    elif isinstance(destination, MutableMapping):
        target = destination
    else:
        raise TypeError(f"Cannot extend {type(destination).__name__}")

    for source in sources:
        if source is None:
            continue
        for key, value in _source_items(source):
            target[key] = value
    return destination


# =============================================================================
# Constructor functions
# =============================================================================

# The ambient scope an unbound `this` falls back to outside strict mode.
global_scope = ProtoObject()


def reset_global_scope() -> None:
    """Forget every property that leaked into the global scope."""
    global_scope._properties.clear()


def resolve_this(this: Optional[ProtoObject], strict: bool = False) -> ProtoObject:
    """
    Work out what a constructor body writes to.

    Called through new(), ``this`` is the fresh instance. Called as a plain
    function, ``this`` is missing: strict code raises, sloppy code silently
    falls back to the global scope.
    """
    if this is not None:
        return this
    if strict:
        raise UnboundThisError("constructor called without new(); 'this' is unbound")
    logger.warning("constructor called without new(); binding 'this' to the global scope")
    return global_scope


def constructor(func: Callable) -> Callable:
    """
    Mark func as a constructor function by giving it a ``prototype`` object.

    The constructor receives the new instance as its first argument. Every
    instance built with new(func) delegates to func.prototype.
    """
    func.prototype = ProtoObject()
    return func


def new(ctor: Callable, *args: Any, **kwargs: Any) -> ProtoObject:
    """
    Instantiate a constructor function.

    Steps:
        1. Create an object delegating to ctor.prototype
        2. Call ctor with that object as ``this``
        3. Return ctor's result if it is an object, else the new object

    Raises:
        TypeError: If ctor is not a constructor function
    """
    prototype = getattr(ctor, "prototype", None)
    if not callable(ctor) or not isinstance(prototype, ProtoObject):
        raise TypeError(f"{ctor!r} is not a constructor")
    instance = create(prototype)
    logger.debug("new %s()", getattr(ctor, "__name__", ctor))
    result = ctor(instance, *args, **kwargs)
    if isinstance(result, ProtoObject):
        return result
    return instance


def instance_of(obj: Any, ctor: Callable) -> bool:
    """True if ctor.prototype appears anywhere on obj's prototype chain."""
    prototype = getattr(ctor, "prototype", None)
    if not isinstance(obj, ProtoObject) or prototype is None:
        return False
    node = obj._prototype
    while node is not None:
        if node is prototype:
            return True
        node = node._prototype
    return False
