"""
Prototypal Idioms Package

An annotated tour of object creation and inheritance in a prototype-based
object model:

    - Constructor functions (and the missing-new() hazard)
    - Factory functions and object literals
    - Prototype-chain delegation (create)
    - Mixin composition (extend)
    - Privileged methods over closed-over state
    - Dispatch by conditional chain vs. command table

ARCHITECTURAL GUARANTEE:
------------------------
Every idiom is self-contained. Demonstrations share no mutable state;
the mixin method tables they share are read-only.

The object model itself lives in prototypal.prototype.
"""

__version__ = "0.1.0"
