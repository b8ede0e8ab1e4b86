# Copyright (c) Meta Platforms, Inc. and affiliates
from colorama import Fore, Style, init

from behavioral.state import Transition


class ConsoleReporter:
    """Prints demo banners and vending machine transitions to the terminal."""

    def __init__(self, use_color: bool = True, show_headers: bool = True):
        """
        Initialize the console reporter.

        Args:
            use_color: Whether to colour output with ANSI codes
            show_headers: Whether header() prints section banners
        """
        if use_color:
            init()  # Initialize colorama
        self.use_color = use_color
        self.show_headers = show_headers

    def _paint(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def header(self, title: str):
        """Print a section banner for a demo.

        Args:
            title: Title shown inside the banner
        """
        if not self.show_headers:
            return
        bar = "=" * (len(title) + 8)
        print(self._paint(bar, Fore.CYAN))
        print(self._paint(f"=== {title} ===", Fore.CYAN))
        print(self._paint(bar, Fore.CYAN))

    def report(self, result: Transition):
        """Print the customer-facing message of a transition.

        Applied transitions are shown in green, ignored events in yellow.
        """
        color = Fore.YELLOW if result.ignored else Fore.GREEN
        print(self._paint(result.message, color))

    def __call__(self, result: Transition):
        self.report(result)
