# Copyright (c) Meta Platforms, Inc. and affiliates
from typing import Optional

from visualizer import ConsoleReporter
from .machine import VendingMachine


def main(reporter: Optional[ConsoleReporter] = None):
    reporter = reporter or ConsoleReporter()
    machine = VendingMachine(notify=reporter)

    print("Trying to get a product without money:")
    machine.select_product()

    print("\nInserting money and selecting product:")
    machine.insert_money()
    machine.select_product()
    machine.dispense()

    # The only product is gone now
    print("\nTrying to get another product:")
    machine.insert_money()
    machine.select_product()


if __name__ == '__main__':
    main()
