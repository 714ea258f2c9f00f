"""
Demonstration catalogue: one self-contained example per idiom.

Each Demonstration wraps a zero-argument function that builds its objects
from scratch and returns what a reader would inspect. No demonstration
shares state with another; the unsafe constructor example cleans up the
global scope it pollutes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List

from prototypal import constructors, dispatch, mixins, privileged
from prototypal.logging import get_logger
from prototypal.prototype import global_scope, new, reset_global_scope

logger = get_logger(__name__)


class Idiom(Enum):
    """The family each demonstration belongs to."""
    CONSTRUCTOR = "constructor"
    LITERAL = "literal"
    FACTORY = "factory"
    PROTOTYPE = "prototype"
    PRIVILEGED = "privileged"
    MIXIN = "mixin"
    DISPATCH = "dispatch"


@dataclass(frozen=True)
class Demonstration:
    name: str
    idiom: Idiom
    summary: str
    run: Callable[[], Any]
    hazard: bool = False


@dataclass
class DemoResult:
    name: str
    idiom: Idiom
    value: Any


def _unsafe_constructor() -> Dict[str, Any]:
    my_bar = new(constructors.unsafe_bar)
    try:
        broken_bar = constructors.unsafe_bar()
        leaked_band = getattr(global_scope, "band", None)
    finally:
        reset_global_scope()
    return {"my_bar": my_bar, "broken_bar": broken_bar, "leaked_band": leaked_band}


def _safe_constructor() -> Dict[str, Any]:
    return {"with_new": new(constructors.safe_bar), "without_new": constructors.safe_bar()}


def _literal():
    return constructors.literal_bar


def _factory():
    return constructors.create_bar_factory()


def _object_create():
    return constructors.create_delegating_bar()


def _old_prototype_assignment():
    return new(constructors.PrototypeBar)


def _privileged_methods() -> Dict[str, bool]:
    bar = privileged.create_private_bar()
    return {"after_open": bar.open().is_open(), "after_close": bar.close().is_open()}


def _mixin_methods():
    bar = mixins.create_member_bar()
    bar.open()
    bar.add({"name": "johnny", "joined": datetime.now()})
    return bar


def _defaults_and_options():
    return mixins.create_configured_bar({"name": "The Dead Goat Saloon"})


DEMONSTRATIONS: List[Demonstration] = [
    Demonstration(
        "unsafe-constructor", Idiom.CONSTRUCTOR,
        "Constructor called without new() leaks its properties into the global scope.",
        _unsafe_constructor, hazard=True,
    ),
    Demonstration(
        "safe-constructor", Idiom.CONSTRUCTOR,
        "Constructor that re-invokes itself through new() when called bare.",
        _safe_constructor,
    ),
    Demonstration("literal", Idiom.LITERAL, "One-off object literal.", _literal),
    Demonstration("factory", Idiom.FACTORY, "Factory returning a fresh literal each call.", _factory),
    Demonstration(
        "object-create", Idiom.PROTOTYPE,
        "Factory returning an object that delegates to a shared method table.",
        _object_create,
    ),
    Demonstration(
        "old-prototype-assignment", Idiom.PROTOTYPE,
        "Methods assigned to a constructor's prototype, shared by every instance.",
        _old_prototype_assignment,
    ),
    Demonstration(
        "privileged-methods", Idiom.PRIVILEGED,
        "Methods closing over a flag that is never exposed as a property.",
        _privileged_methods,
    ),
    Demonstration(
        "mixin-methods", Idiom.MIXIN,
        "Two method tables flattened into one prototype, with per-instance members.",
        _mixin_methods,
    ),
    Demonstration(
        "defaults-and-options", Idiom.MIXIN,
        "Defaults and caller options merged onto a mixin instance.",
        _defaults_and_options,
    ),
    Demonstration(
        "switch-case", Idiom.DISPATCH,
        "Random action dispatched through an if/elif chain.",
        dispatch.do_action_switch,
    ),
    Demonstration(
        "command-object", Idiom.DISPATCH,
        "Random action dispatched through a command table.",
        dispatch.do_action_command,
    ),
]


def get_demonstration(name: str) -> Demonstration:
    """
    Look up a demonstration by name.

    Raises:
        KeyError: If no demonstration has that name
    """
    for demo in DEMONSTRATIONS:
        if demo.name == name:
            return demo
    raise KeyError(f"Unknown demonstration: {name}")


def run_demonstration(name: str) -> DemoResult:
    demo = get_demonstration(name)
    if demo.hazard:
        logger.info("running %s (demonstrates a hazard)", demo.name)
    else:
        logger.info("running %s", demo.name)
    return DemoResult(name=demo.name, idiom=demo.idiom, value=demo.run())


def run_all() -> List[DemoResult]:
    """Run every demonstration in catalogue order."""
    return [run_demonstration(demo.name) for demo in DEMONSTRATIONS]
