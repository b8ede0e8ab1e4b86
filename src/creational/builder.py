# Copyright (c) Meta Platforms, Inc. and affiliates
import copy
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Pizza:
    size: Optional[str] = None
    crust_type: Optional[str] = None
    sauce: Optional[str] = None
    toppings: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return (f"Pizza(size={self.size!r}, crust_type={self.crust_type!r}, "
                f"toppings={self.toppings!r}, sauce={self.sauce!r})")


class PizzaBuilder:
    """Assembles a Pizza step by step through chained calls.

    Example:
        >>> pizza = PizzaBuilder().set_size("large").add_topping("cheese").build()
        >>> pizza.toppings
        ['cheese']
    """

    def __init__(self):
        self._pizza = Pizza()

    def set_size(self, size: str) -> 'PizzaBuilder':
        self._pizza.size = size
        return self

    def set_crust_type(self, crust_type: str) -> 'PizzaBuilder':
        self._pizza.crust_type = crust_type
        return self

    def set_sauce(self, sauce: str) -> 'PizzaBuilder':
        self._pizza.sauce = sauce
        return self

    def add_topping(self, topping: str) -> 'PizzaBuilder':
        self._pizza.toppings.append(topping)
        return self

    def build(self) -> Pizza:
        # Later builder calls must not change pizzas already handed out
        return copy.deepcopy(self._pizza)


def main():
    custom_pizza = (PizzaBuilder()
                    .set_size("large")
                    .set_crust_type("thin")
                    .set_sauce("tomato")
                    .add_topping("cheese")
                    .add_topping("pepperoni")
                    .add_topping("mushrooms")
                    .build())

    print("Custom Pizza Order Details:")
    print(custom_pizza)

    vegetarian_pizza = (PizzaBuilder()
                        .set_size("medium")
                        .set_crust_type("thick")
                        .set_sauce("pesto")
                        .add_topping("cheese")
                        .add_topping("tomatoes")
                        .add_topping("bell peppers")
                        .add_topping("olives")
                        .build())

    print("\nVegetarian Pizza Order Details:")
    print(vegetarian_pizza)


if __name__ == '__main__':
    main()
