"""Bridge between a smart-home remote and the devices it drives."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

FULL_POWER = 100


class SmartDevice(ABC):
    """A device with a limited power reserve that drains each time it is switched on."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.id = random.randint(1, 100)
        self.power = FULL_POWER
        self.power_state = False

    @property
    @abstractmethod
    def power_level(self) -> int:
        """How much the device draws when switched on."""

    @abstractmethod
    def turn_on(self) -> None:
        """Switch on if off and power remains."""

    @abstractmethod
    def turn_off(self) -> None:
        """Switch off if on."""

    @abstractmethod
    def set_power_level(self, level: int) -> None:
        """Set the power level, clamped to the device's range."""

    @abstractmethod
    def _update_power(self) -> None:
        """Drain the power reserve for one switch-on."""

    def _toggle(self) -> None:
        self.power_state = not self.power_state

    def _switch_on(self, message: str) -> None:
        if not self.power_state and self.power > 0:
            self._toggle()
            self._update_power()
            print(message)

    def _switch_off(self, message: str) -> None:
        if self.power_state:
            self._toggle()
            print(message)

    def __repr__(self) -> str:
        state = "on" if self.power_state else "off"
        return f"{type(self).__name__}({self.name!r}, power={self.power}, {state})"


class SmartLight(SmartDevice):
    """A dimmable light; brightness runs from 1 to 10."""

    def __init__(self, name: str, brightness: int) -> None:
        super().__init__(name)
        self.brightness = brightness

    @property
    def power_level(self) -> int:
        return self.brightness

    def set_power_level(self, level: int) -> None:
        self.brightness = min(max(1, level), 10)

    def turn_on(self) -> None:
        self._switch_on("Light on!")

    def turn_off(self) -> None:
        self._switch_off("Light off!")

    def _update_power(self) -> None:
        self.power = max(self.power - 1, 0)


class SmartHeater(SmartDevice):
    """A heater whose heat setting, from 1 to 20, is drained on each switch-on."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.heat = 5

    @property
    def power_level(self) -> int:
        return self.heat

    def set_power_level(self, level: int) -> None:
        self.heat = min(max(level, 1), 20)

    def turn_on(self) -> None:
        self._switch_on("Heating up!")

    def turn_off(self) -> None:
        self._switch_off("Heater shutting down!")

    def _update_power(self) -> None:
        self.power = max(self.power - self.heat, 0)


class SmartHomeObjectController:
    """A remote that works any smart device through the common interface."""

    def __init__(self, device: SmartDevice) -> None:
        self.device = device

    def turn_on_device(self) -> None:
        self.device.turn_on()

    def turn_off_device(self) -> None:
        self.device.turn_off()

    @property
    def power(self) -> int:
        return self.device.power

    @property
    def power_state(self) -> bool:
        return self.device.power_state

    def set_device_power_level(self, level: int) -> None:
        self.device.set_power_level(level)


def main(argv: list[str] | None = None) -> int:
    light_remote = SmartHomeObjectController(SmartLight("DeskLampBulb", 10))
    heater_remote = SmartHomeObjectController(SmartHeater("StudyHeater"))

    light_remote.turn_on_device()
    print(f"Lightbulb Power: {light_remote.power}")
    light_remote.turn_off_device()

    heater_remote.turn_on_device()
    print(f"Heater Power: {heater_remote.power}")
    heater_remote.turn_off_device()

    heater_remote.set_device_power_level(8)
    heater_remote.turn_on_device()
    print(f"Heater Power (after increase): {heater_remote.power}")
    heater_remote.turn_off_device()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())