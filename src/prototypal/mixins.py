"""
Mixin Composition

Two independent method tables are flattened into one prototype with
extend(). Instances delegate to that single prototype, which gives them the
methods of both tables without multiple inheritance.

    membership:   add(member), get_member(name)
    availability: open(), close(), is_open()

ARCHITECTURAL RULE:
    Method tables are read-only (MappingProxyType). They are only ever
    used as extend() sources.
    Per-instance state (members, configuration, the open flag) lives on the
    instance, never on the shared prototype.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from prototypal.logging import get_logger
from prototypal.prototype import ProtoObject, create, extend

logger = get_logger(__name__)


def _add(this, member):
    name = member["name"] if isinstance(member, Mapping) else member.name
    this.members[name] = member
    return this


def _get_member(this, name: str) -> Optional[Any]:
    return this.members.get(name)


def _open(this):
    this.opened = True
    return this


def _close(this):
    this.opened = False
    return this


def _is_open(this) -> bool:
    return getattr(this, "opened", False)


membership = MappingProxyType({"add": _add, "get_member": _get_member})

availability = MappingProxyType({"open": _open, "close": _close, "is_open": _is_open})

BAR_DEFAULTS = MappingProxyType({
    "name": "The Saloon",
    "specials": "Whisky, Gin, Tequila",
})


def mixin_prototype(*tables: Mapping) -> ProtoObject:
    """
    Combine method tables into a fresh prototype, later tables winning.

    With no arguments, combines membership and availability.
    """
    if not tables:
        tables = (membership, availability)
    return extend(ProtoObject(), *tables)


bar_prototype = mixin_prototype()


def create_member_bar() -> ProtoObject:
    """Return a bar with both mixins and its own empty member registry."""
    instance = create(bar_prototype)
    instance.members = {}
    return instance


def create_configured_bar(options: Optional[Mapping] = None) -> ProtoObject:
    """
    Return a bar with both mixins, configured from defaults and options.

    Defaults and options are merged onto the instance itself, options
    overriding defaults. The shared prototype is left untouched.
    """
    instance = create(bar_prototype)
    logger.debug("configuring bar with options %r", options)
    return extend(instance, BAR_DEFAULTS, options)
