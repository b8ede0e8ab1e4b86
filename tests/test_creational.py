# Copyright (c) Meta Platforms, Inc. and affiliates
import pytest

from creational import builder, factory, prototype, singleton
from creational.builder import Pizza, PizzaBuilder
from creational.factory import Admin, Moderator, RegularUser, UnknownUserTypeError, UserFactory
from creational.prototype import Circle, DeepShape, Point, Rectangle, ShallowShape
from creational.singleton import ConfigurationManager


class TestUserFactory:

    @pytest.mark.parametrize("user_type,cls,role", [
        ("admin", Admin, "Admin"),
        ("moderator", Moderator, "Moderator"),
        ("regular", RegularUser, "Regular User"),
        ("ADMIN", Admin, "Admin"),
        ("Moderator", Moderator, "Moderator"),
    ])
    def test_creates_user_for_category(self, user_type, cls, role):
        user = UserFactory.create_user(user_type)
        assert isinstance(user, cls)
        assert user.role == role

    def test_permissions(self):
        assert UserFactory.create_user("admin").permissions == [
            "create_user", "delete_user", "edit_user", "manage_system", "view_logs"
        ]
        assert UserFactory.create_user("moderator").permissions == [
            "edit_content", "delete_content", "manage_users", "view_reports"
        ]
        assert UserFactory.create_user("regular").permissions == [
            "view_content", "create_content", "edit_own_content"
        ]

    def test_unknown_category_raises(self):
        with pytest.raises(UnknownUserTypeError) as excinfo:
            UserFactory.create_user("superuser")
        assert excinfo.value.user_type == "superuser"
        assert str(excinfo.value) == "Invalid user type: superuser"
        assert isinstance(excinfo.value, ValueError)

    def test_available_types_are_all_creatable(self):
        for user_type in UserFactory.available_types():
            UserFactory.create_user(user_type)

    def test_main(self, capsys):
        factory.main()
        out = capsys.readouterr().out
        assert "=== Admin ===" in out
        assert "Role: Regular User" in out
        assert "Permissions: ['edit_content', 'delete_content', 'manage_users', 'view_reports']" in out


class TestPizzaBuilder:

    def test_builds_configured_pizza(self):
        pizza = (PizzaBuilder()
                 .set_size("large")
                 .set_crust_type("thin")
                 .set_sauce("tomato")
                 .add_topping("cheese")
                 .add_topping("pepperoni")
                 .build())
        assert pizza == Pizza(size="large", crust_type="thin", sauce="tomato",
                              toppings=["cheese", "pepperoni"])

    def test_built_pizza_is_independent_of_builder(self):
        pizza_builder = PizzaBuilder().add_topping("cheese")
        first = pizza_builder.build()
        pizza_builder.add_topping("olives")
        assert first.toppings == ["cheese"]
        assert pizza_builder.build().toppings == ["cheese", "olives"]

    def test_str(self):
        pizza = PizzaBuilder().set_size("medium").add_topping("olives").build()
        assert str(pizza) == "Pizza(size='medium', crust_type=None, toppings=['olives'], sauce=None)"

    def test_main(self, capsys):
        builder.main()
        out = capsys.readouterr().out
        assert "Custom Pizza Order Details:" in out
        assert "toppings=['cheese', 'tomatoes', 'bell peppers', 'olives']" in out


class TestPrototype:

    def test_clones_are_equal_but_distinct(self):
        circle = Circle(10, "Red")
        rectangle = Rectangle(20, 30, "Blue")

        circle_clone = circle.clone()
        rectangle_clone = rectangle.clone()

        assert circle_clone is not circle
        assert circle_clone.get_info() == "Circle [radius=10, color=Red]"
        assert rectangle_clone is not rectangle
        assert rectangle_clone.get_info() == "Rectangle [width=20, height=30, color=Blue]"

    def test_shallow_clone_shares_center(self):
        original = ShallowShape(Point(0, 0), "Red")
        clone = original.clone()

        original.move_x(5)

        assert clone.center is original.center
        assert clone.center.x == 5

    def test_deep_clone_owns_center(self):
        original = DeepShape(Point(0, 0), "Blue")
        clone = original.clone()

        original.move_x(5)

        assert clone.center is not original.center
        assert clone.center.x == 0
        assert original.get_info() == "DeepShape [center=(5, 0), color=Blue]"

    def test_shallow_vs_deep_output(self, capsys):
        prototype.shallow_vs_deep_main()
        out = capsys.readouterr().out
        assert "Clone: ShallowShape [center=(5, 0), color=Red]" in out
        assert "Clone: DeepShape [center=(0, 0), color=Blue]" in out

    def test_main(self, capsys):
        prototype.main()
        out = capsys.readouterr().out
        assert out.count("Circle [radius=10, color=Red]") == 2


class TestSingleton:

    def test_same_instance(self):
        assert ConfigurationManager.get_instance() is ConfigurationManager.get_instance()

    def test_defaults(self):
        config = ConfigurationManager.get_instance()
        assert config.theme == "default"
        assert config.dark_mode is False

    def test_changes_visible_through_every_reference(self):
        first = ConfigurationManager.get_instance()
        second = ConfigurationManager.get_instance()
        second.theme = "light-blue"
        assert first.theme == "light-blue"

    def test_reset_instance(self):
        first = ConfigurationManager.get_instance()
        ConfigurationManager.reset_instance()
        assert ConfigurationManager.get_instance() is not first

    def test_main(self, capsys):
        singleton.main()
        out = capsys.readouterr().out
        assert "Are both references the same instance? True" in out
        assert "Dark mode from config2: True" in out
        assert out.rstrip().endswith("Theme from config1: light-blue")
