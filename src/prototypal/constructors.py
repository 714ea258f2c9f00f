"""
Construction Idioms

Five ways to build the same conceptual "bar" object, plus the classic
constructor-with-prototype-methods pattern.

    - unsafe_bar:            constructor function that trusts its caller to use new()
    - strict_bar:            the same constructor under strict `this` rules
    - safe_bar:              self-guarding constructor that repairs a missing new()
    - literal_bar:           a one-off object literal
    - create_bar_factory:    factory returning a fresh literal on every call
    - create_delegating_bar: factory returning an object delegating to delegating_prototype
    - PrototypeBar:          constructor whose methods live on its prototype

HAZARD:
    unsafe_bar called without new() does not fail. Its `this` falls back to
    the global scope and `band` leaks there. This is demonstrated, never
    relied upon. Prefer new(), safe_bar, or a factory.
"""

from typing import Optional

from prototypal.mixins import availability
from prototypal.prototype import (
    ProtoObject,
    constructor,
    create,
    instance_of,
    new,
    resolve_this,
)

BAND = "lame"
HOUSE_BAND = "Dr. Teeth and the Electric Mayhem"


@constructor
def unsafe_bar(this: Optional[ProtoObject] = None):
    """Constructor expecting new(). Called bare, it writes to the global scope."""
    this = resolve_this(this)
    this.band = BAND


@constructor
def strict_bar(this: Optional[ProtoObject] = None):
    """Constructor under strict rules: a bare call raises UnboundThisError."""
    this = resolve_this(this, strict=True)
    this.band = BAND


@constructor
def safe_bar(this: Optional[ProtoObject] = None):
    """Constructor that calls new() on itself when invoked without it."""
    if not instance_of(this, safe_bar):
        return new(safe_bar)
    this.band = BAND
    return this


# Single-use object: no constructor needed.
literal_bar = ProtoObject(band=HOUSE_BAND)


def create_bar_factory() -> ProtoObject:
    """Return a new, fully independent bar each call."""
    return ProtoObject(band=HOUSE_BAND)


delegating_prototype = ProtoObject(open=availability["open"], close=availability["close"])


def create_delegating_bar() -> ProtoObject:
    """Return an empty bar whose methods are inherited from delegating_prototype."""
    return create(delegating_prototype)


@constructor
def PrototypeBar(this: ProtoObject):
    """Empty constructor; open/close are assigned to PrototypeBar.prototype."""


PrototypeBar.prototype.open = availability["open"]
PrototypeBar.prototype.close = availability["close"]
