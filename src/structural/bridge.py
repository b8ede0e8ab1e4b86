# Copyright (c) Meta Platforms, Inc. and affiliates
"""
Bridge pattern: remotes and devices vary independently.

A ``RemoteControl`` holds a ``Device`` and only talks to it through the
``Device`` interface, so any remote works with any device.
"""

from abc import ABC, abstractmethod


class Device(ABC):
    """Base class for controllable devices."""

    @abstractmethod
    def is_enabled(self) -> bool:
        pass

    @abstractmethod
    def enable(self):
        pass

    @abstractmethod
    def disable(self):
        pass

    @abstractmethod
    def get_channel(self) -> int:
        pass

    @abstractmethod
    def set_channel(self, channel: int):
        pass

    @abstractmethod
    def get_volume(self) -> int:
        pass

    @abstractmethod
    def set_volume(self, volume: int):
        pass


class _BaseDevice(Device):
    """Power and volume handling shared by the concrete devices."""

    def __init__(self, volume: int, channel: int):
        self._on = False
        self._volume = volume
        self._channel = channel

    def is_enabled(self) -> bool:
        return self._on

    def enable(self):
        self._on = True

    def disable(self):
        self._on = False

    def get_channel(self) -> int:
        return self._channel

    def set_channel(self, channel: int):
        self._channel = channel

    def get_volume(self) -> int:
        return self._volume

    def set_volume(self, volume: int):
        # Out of range values are ignored
        if 0 <= volume <= 100:
            self._volume = volume


class TV(_BaseDevice):

    def __init__(self):
        super().__init__(volume=30, channel=1)


class Radio(_BaseDevice):
    """FM radio; channels are whole MHz between 87 and 108."""

    def __init__(self):
        super().__init__(volume=20, channel=87)

    def set_channel(self, channel: int):
        if 87 <= channel <= 108:
            self._channel = channel


class RemoteControl:

    def __init__(self, device: Device):
        self.device = device

    def turn_on(self):
        self.device.enable()

    def turn_off(self):
        self.device.disable()

    def set_channel(self, channel: int):
        self.device.set_channel(channel)

    def set_volume(self, volume: int):
        self.device.set_volume(volume)


class BasicRemote(RemoteControl):

    def channel_up(self):
        self.set_channel(self.device.get_channel() + 1)

    def channel_down(self):
        self.set_channel(self.device.get_channel() - 1)

    def volume_up(self):
        self.set_volume(self.device.get_volume() + 10)

    def volume_down(self):
        self.set_volume(self.device.get_volume() - 10)


class AdvancedRemote(BasicRemote):

    def mute(self):
        self.device.set_volume(0)

    def save_channel(self, channel_number: int):
        print(f"Saved channel {channel_number} as favorite")
        self.set_channel(channel_number)


def main():
    tv = TV()
    basic_tv_remote = BasicRemote(tv)
    advanced_tv_remote = AdvancedRemote(tv)

    print("Basic Remote with TV:")
    basic_tv_remote.turn_on()
    basic_tv_remote.set_channel(5)
    basic_tv_remote.volume_up()
    print(f"TV Channel: {tv.get_channel()}")
    print(f"TV Volume: {tv.get_volume()}")

    print("\nAdvanced Remote with TV:")
    advanced_tv_remote.mute()
    advanced_tv_remote.save_channel(7)
    print(f"TV Volume after mute: {tv.get_volume()}")

    radio = Radio()
    basic_radio_remote = BasicRemote(radio)
    advanced_radio_remote = AdvancedRemote(radio)

    print("\nBasic Remote with Radio:")
    basic_radio_remote.turn_on()
    basic_radio_remote.set_channel(98)  # FM 98.0
    basic_radio_remote.volume_up()
    print(f"Radio Channel: {radio.get_channel()}")
    print(f"Radio Volume: {radio.get_volume()}")

    print("\nAdvanced Remote with Radio:")
    advanced_radio_remote.mute()
    advanced_radio_remote.save_channel(101)
    print(f"Radio Volume after mute: {radio.get_volume()}")


if __name__ == '__main__':
    main()
