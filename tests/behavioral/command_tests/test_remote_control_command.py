import pytest
from behavioral.command.remote_control_command import Light, TurnOnCommand, TurnOffCommand, Remote,\
    command_demo


@pytest.mark.unit
def test_commands_delegate_to_light():
    light = Light()
    assert TurnOnCommand(light).execute() == "Light is ON"
    assert TurnOffCommand(light).execute() == "Light is OFF"


@pytest.mark.unit
def test_remote_runs_current_command_after_swap():
    light = Light()
    remote = Remote(TurnOffCommand(light))
    assert remote.press() == "Light is OFF"
    remote.set_command(TurnOnCommand(light))
    assert remote.press() == "Light is ON"
    assert remote.press() == "Light is ON"


@pytest.mark.unit
def test_command_demo():
    assert command_demo() == "Light is ON | Light is OFF"
