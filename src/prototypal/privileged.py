"""
Privileged Methods

A factory keeps its state in a local variable and returns methods that
close over it. The state never becomes a property of the returned object:
the only way to read or change it is through those methods.

    bar = create_private_bar()
    bar.open().is_open()   # True
    bar.close().is_open()  # False

Each call to create_private_bar() owns an independent flag.
"""

from prototypal.logging import get_logger
from prototypal.prototype import ProtoObject

logger = get_logger(__name__)


def create_private_bar() -> ProtoObject:
    opened = False

    def open(this):
        nonlocal opened
        opened = True
        logger.debug("private bar opened")
        return this

    def close(this):
        nonlocal opened
        opened = False
        logger.debug("private bar closed")
        return this

    def is_open(this):
        return opened

    return ProtoObject(open=open, close=close, is_open=is_open)
