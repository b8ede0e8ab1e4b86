# Copyright (c) Meta Platforms, Inc. and affiliates
"""
Prototype pattern: creating objects by cloning existing ones.

``Circle`` and ``Rectangle`` only hold immutable values, so a shallow copy is
a full clone. ``ShallowShape`` and ``DeepShape`` both hold a mutable ``Point``
and show the difference between sharing it and copying it.
"""

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Shape(ABC):

    @abstractmethod
    def clone(self) -> 'Shape':
        pass

    @abstractmethod
    def get_info(self) -> str:
        pass


class Circle(Shape):

    def __init__(self, radius: int, color: str):
        self.radius = radius
        self.color = color

    def clone(self) -> 'Circle':
        return copy.copy(self)

    def get_info(self) -> str:
        return f"Circle [radius={self.radius}, color={self.color}]"


class Rectangle(Shape):

    def __init__(self, width: int, height: int, color: str):
        self.width = width
        self.height = height
        self.color = color

    def clone(self) -> 'Rectangle':
        return copy.copy(self)

    def get_info(self) -> str:
        return f"Rectangle [width={self.width}, height={self.height}, color={self.color}]"


@dataclass
class Point:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class ShallowShape(Shape):

    def __init__(self, center: Point, color: str):
        self.center = center
        self.color = color

    def clone(self) -> 'ShallowShape':
        # The clone shares the same Point instance
        return copy.copy(self)

    def move_x(self, dx: int):
        self.center.x += dx

    def get_info(self) -> str:
        return f"ShallowShape [center={self.center}, color={self.color}]"


class DeepShape(Shape):

    def __init__(self, center: Point, color: str):
        self.center = center
        self.color = color

    def clone(self) -> 'DeepShape':
        return copy.deepcopy(self)

    def move_x(self, dx: int):
        self.center.x += dx

    def get_info(self) -> str:
        return f"DeepShape [center={self.center}, color={self.color}]"


def main():
    original_circle = Circle(10, "Red")
    original_rectangle = Rectangle(20, 30, "Blue")

    cloned_circle = original_circle.clone()
    cloned_rectangle = original_rectangle.clone()

    print("Original shapes:")
    print(original_circle.get_info())
    print(original_rectangle.get_info())

    print("\nCloned shapes:")
    print(cloned_circle.get_info())
    print(cloned_rectangle.get_info())


def _show_move(original, clone):
    print("Before moving original:")
    print(f"Original: {original.get_info()}")
    print(f"Clone: {clone.get_info()}")

    original.move_x(5)

    print("\nAfter moving original:")
    print(f"Original: {original.get_info()}")
    print(f"Clone: {clone.get_info()}")


def shallow_vs_deep_main():
    print("Shallow Copy Demonstration:")
    original_shallow = ShallowShape(Point(0, 0), "Red")
    _show_move(original_shallow, original_shallow.clone())

    print("\nDeep Copy Demonstration:")
    original_deep = DeepShape(Point(0, 0), "Blue")
    _show_move(original_deep, original_deep.clone())


if __name__ == '__main__':
    main()
    print()
    shallow_vs_deep_main()
