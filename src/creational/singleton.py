# Copyright (c) Meta Platforms, Inc. and affiliates
from typing import Optional


class ConfigurationManager:
    """Application display settings shared through a single instance.

    Use get_instance() rather than the constructor so every caller sees the
    same settings object.
    """

    _instance: Optional['ConfigurationManager'] = None

    def __init__(self):
        self.theme = "default"
        self.dark_mode = False

    @classmethod
    def get_instance(cls) -> 'ConfigurationManager':
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance so the next get_instance() starts fresh."""
        cls._instance = None


def main():
    config1 = ConfigurationManager.get_instance()
    config1.theme = "dark-blue"
    config1.dark_mode = True

    config2 = ConfigurationManager.get_instance()

    print("=== Demonstrating Singleton Pattern ===")
    print(f"Are both references the same instance? {config1 is config2}")

    print("\n=== Configuration Values ===")
    print(f"Theme from config1: {config1.theme}")
    print(f"Dark mode from config2: {config2.dark_mode}")

    config2.theme = "light-blue"

    print("\n=== After changing theme using config2 ===")
    print(f"Theme from config1: {config1.theme}")


if __name__ == '__main__':
    main()
