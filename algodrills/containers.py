"""Command-driven queue and stack drills."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _split_command(line: str) -> tuple[str, str]:
    name, _, argument = line.partition(" ")
    return name, argument


def run_queue_commands(lines: Iterable[str]) -> list[int]:
    """Run queue commands and return the values they print.

    Commands are ``push X``, ``pop``, ``size``, ``empty``, ``front`` and ``back``;
    reading an empty queue yields -1. Other lines are ignored.
    """
    queue: deque[int] = deque()
    output: list[int] = []
    for line in lines:
        name, argument = _split_command(line.rstrip("\n"))
        if name == "push":
            queue.append(int(argument))
        elif name == "pop":
            output.append(queue.popleft() if queue else -1)
        elif name == "size":
            output.append(len(queue))
        elif name == "empty":
            output.append(0 if queue else 1)
        elif name == "front":
            output.append(queue[0] if queue else -1)
        elif name == "back":
            output.append(queue[-1] if queue else -1)
    return output


def run_stack_commands(commands: Iterable[Sequence[int]]) -> list[int]:
    """Run numbered stack commands and return the values they print.

    ``(1, X)`` pushes X, ``(2,)`` pops, ``(3,)`` gives the size, ``(4,)`` gives 1
    when empty and 0 otherwise; any other code peeks at the top. Reading an empty
    stack yields -1.
    """
    stack: list[int] = []
    output: list[int] = []
    for command in commands:
        if not command:
            raise ValueError("empty command")
        code = command[0]
        if code == 1:
            if len(command) < 2:
                raise ValueError("push needs a value")
            stack.append(command[1])
        elif code == 2:
            output.append(stack.pop() if stack else -1)
        elif code == 3:
            output.append(len(stack))
        elif code == 4:
            output.append(0 if stack else 1)
        else:
            output.append(stack[-1] if stack else -1)
    return output


def echo_pushes(lines: Iterable[str]) -> list[int]:
    """Return the values of the ``push X`` lines, in order; other lines are ignored."""
    values = []
    for line in lines:
        name, argument = _split_command(line.rstrip("\n"))
        if name == "push":
            values.append(int(argument))
    return values