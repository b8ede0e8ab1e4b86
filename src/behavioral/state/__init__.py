# Copyright (c) Meta Platforms, Inc. and affiliates
from .states import (
    MachineState,
    MachineEvent,
    Transition,
    State,
    NoMoneyState,
    HasMoneyState,
    DispensingState,
    STATE_HANDLERS,
    transition,
)
from .machine import VendingMachine

__all__ = [
    'MachineState',
    'MachineEvent',
    'Transition',
    'State',
    'NoMoneyState',
    'HasMoneyState',
    'DispensingState',
    'STATE_HANDLERS',
    'transition',
    'VendingMachine',
]
