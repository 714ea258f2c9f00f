"""
Dispatch Idioms

Two equivalent ways to run the action associated with a name:

    - do_action_switch:  an if/elif chain over fixed names
    - do_action_command: a command table mapping names to callables

Both pick a random name from ACTIONS when none is given, and both return the
name of the action they ran.

NOTE:
    With random selection the name always comes from ACTIONS, so the
    InvalidActionError path is only reachable with an explicit, unknown
    action. It is kept as a guard.
"""

import random
from types import MappingProxyType
from typing import Optional

from prototypal.exceptions import InvalidActionError
from prototypal.logging import get_logger

logger = get_logger(__name__)

ACTIONS = ("hack", "slash", "run")


def pick_action(rng: Optional[random.Random] = None) -> str:
    """Choose one of ACTIONS uniformly."""
    rng = rng or random
    return rng.choice(ACTIONS)


def do_action_switch(action: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    if action is None:
        action = pick_action(rng)
    logger.debug("switch dispatch: %s", action)

    if action == "hack":
        return "hack"
    elif action == "slash":
        return "slash"
    elif action == "run":
        return "run"
    raise InvalidActionError(action)


def _hack() -> str:
    return "hack"


def _slash() -> str:
    return "slash"


def _run() -> str:
    return "run"


COMMANDS = MappingProxyType({
    "hack": _hack,
    "slash": _slash,
    "run": _run,
})


def do_action_command(action: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    if action is None:
        action = pick_action(rng)
    logger.debug("command dispatch: %s", action)

    command = COMMANDS.get(action) if isinstance(action, str) else None
    if not callable(command):
        raise InvalidActionError(action)
    return command()
