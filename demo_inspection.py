#!/usr/bin/env python3
"""
Demo: Inspect a configured mixin bar and dump the report as YAML.

Options are read from YAML the same way a user-supplied file would be.
"""

from prototypal.inspection import analyze_object
from prototypal.logging import configure_logging
from prototypal.mixins import create_configured_bar
from prototypal.serialization import object_to_yaml, options_from_yaml, report_to_yaml

OPTIONS_YAML = """
name: The Dead Goat Saloon
"""


def main():
    configure_logging()

    bar = create_configured_bar(options_from_yaml(OPTIONS_YAML))
    bar.add_on = "live music"
    report = analyze_object(bar)

    print("=" * 70)
    print(f"OBJECT REPORT: {bar.name}")
    print("=" * 70)
    print()
    print(f"  Own Keys:        {report.own_keys}")
    print(f"  Inherited Keys:  {report.inherited_keys}")
    print(f"  Shadowed Keys:   {report.shadowed_keys if report.shadowed_keys else 'None'}")
    print(f"  Methods:         {report.method_names}")
    print(f"  Chain Depth:     {report.chain_depth}")
    print()
    print("REPORT (YAML)")
    print("-" * 70)
    print(report_to_yaml(report))
    print("SNAPSHOT (YAML)")
    print("-" * 70)
    print(object_to_yaml(bar))


if __name__ == "__main__":
    main()
