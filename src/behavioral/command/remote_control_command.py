from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

__all__ = [
    "Command",
    "Light",
    "TurnOnCommand",
    "TurnOffCommand",
    "Remote",
    "command_demo",
]

# ==========================
# Module: remote_control_command
# Purpose: Minimal Command pattern: a receiver, two concrete commands and an
#          invoker whose command can be swapped at runtime.
# ==========================


class Command(ABC):
    """
    Uniform execution interface.
    """

    @abstractmethod
    def execute(self) -> str:
        """
        :return: Receiver's report of what happened.
        """


class Light:
    """Receiver that performs the actual on/off work."""

    def on(self) -> str:
        return "Light is ON"

    def off(self) -> str:
        return "Light is OFF"


class TurnOnCommand(Command):
    def __init__(self, receiver: Light) -> None:
        self._receiver = receiver

    def execute(self) -> str:
        return self._receiver.on()


class TurnOffCommand(Command):
    def __init__(self, receiver: Light) -> None:
        self._receiver = receiver

    def execute(self) -> str:
        return self._receiver.off()


class Remote:
    """
    Invoker: triggers whatever command it currently holds.

    :param command: Initial command.
    """

    def __init__(self, command: Command) -> None:
        self._command = command

    def set_command(self, command: Command) -> None:
        """
        :param command: Command the next press() will run.
        """
        self._command = command

    def press(self) -> str:
        """
        :return: Result of the current command.
        """
        result = self._command.execute()
        logger.debug("Remote pressed: %s", result)
        return result


def command_demo() -> str:
    """Presses the remote once per command and joins the results."""
    light = Light()
    remote = Remote(TurnOnCommand(light))
    first = remote.press()
    remote.set_command(TurnOffCommand(light))
    second = remote.press()
    return f"{first} | {second}"
