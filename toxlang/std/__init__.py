import time
from typing import Any, List

from toxlang.callables import NativeFunction
from toxlang.environment import Environment


def std_clock(args: List[Any]) -> float:
    return time.time()


NATIVES = [
    NativeFunction('clock', 0, std_clock),
]


def populate_global_environment(env: Environment) -> Environment:
    """Define every native function in `env` and return it."""
    for native in NATIVES:
        env.define(native.name, native)
    return env
