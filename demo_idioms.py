#!/usr/bin/env python3
"""
Demo: Run every idiom demonstration and print what it produced.
"""

import logging

from prototypal.demos import DEMONSTRATIONS, run_demonstration
from prototypal.logging import configure_logging
from prototypal.serialization import object_to_dict
from prototypal.prototype import ProtoObject


def describe(value):
    """Render a demonstration result for printing."""
    if isinstance(value, ProtoObject):
        return object_to_dict(value)
    if isinstance(value, dict):
        return {key: describe(item) for key, item in value.items()}
    return value


def main():
    configure_logging(level=logging.WARNING)

    print("=" * 80)
    print("PROTOTYPAL IDIOMS DEMO")
    print("=" * 80)

    for demo in DEMONSTRATIONS:
        result = run_demonstration(demo.name)
        marker = "  [HAZARD]" if demo.hazard else ""
        print(f"\n{demo.name} ({demo.idiom.value}){marker}")
        print("-" * 80)
        print(f"  {demo.summary}")
        print(f"  -> {describe(result.value)}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
