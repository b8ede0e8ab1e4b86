# Copyright (c) Meta Platforms, Inc. and affiliates
from abc import ABC, abstractmethod
from typing import Optional


class Image(ABC):

    @abstractmethod
    def display(self):
        pass


class RealImage(Image):
    """An image whose construction simulates an expensive disk load."""

    load_count = 0

    def __init__(self, filename: str):
        self.filename = filename
        self._load_from_disk()

    def _load_from_disk(self):
        print(f"Loading image: {self.filename}")
        RealImage.load_count += 1

    def display(self):
        print(f"Displaying image: {self.filename}")


class ProxyImage(Image):
    """Defers loading the real image until it is first displayed, then reuses it."""

    def __init__(self, filename: str):
        self.filename = filename
        self._real_image: Optional[RealImage] = None

    @property
    def is_loaded(self) -> bool:
        return self._real_image is not None

    def display(self):
        if self._real_image is None:
            print("(Proxy) First time loading image...")
            self._real_image = RealImage(self.filename)
        else:
            print("(Proxy) Loading from cache...")
        self._real_image.display()


def main():
    image = ProxyImage("high_resolution_photo.jpg")

    print("\nFirst time displaying the image:")
    image.display()

    print("\nSecond time displaying the image:")
    image.display()


if __name__ == '__main__':
    main()
