# Copyright (c) Meta Platforms, Inc. and affiliates
from abc import ABC, abstractmethod

KM_TO_MILES = 0.621371


class WeatherService(ABC):
    """Base class for weather readings."""

    @abstractmethod
    def get_temperature(self) -> float:
        pass

    @abstractmethod
    def get_wind_speed(self) -> float:
        pass

    @abstractmethod
    def get_distance(self) -> float:
        pass


class MetricWeatherService(WeatherService):
    """Simulated readings in Celsius, km/h and kilometres."""

    def get_temperature(self) -> float:
        return 25.0

    def get_wind_speed(self) -> float:
        return 15.0

    def get_distance(self) -> float:
        return 100.0


class ImperialWeatherAdapter(WeatherService):
    """Presents a metric service in Fahrenheit, mph and miles."""

    def __init__(self, metric_service: WeatherService):
        self.metric_service = metric_service

    def get_temperature(self) -> float:
        return self.metric_service.get_temperature() * 9 / 5 + 32

    def get_wind_speed(self) -> float:
        return self.metric_service.get_wind_speed() * KM_TO_MILES

    def get_distance(self) -> float:
        return self.metric_service.get_distance() * KM_TO_MILES


def main():
    metric_service = MetricWeatherService()
    imperial_adapter = ImperialWeatherAdapter(metric_service)

    print("Metric Weather Service:")
    print(f"Temperature: {metric_service.get_temperature():.1f}°C")
    print(f"Wind Speed: {metric_service.get_wind_speed():.1f} km/h")
    print(f"Distance: {metric_service.get_distance():.1f} km")

    print("\nImperial Weather Service (through adapter):")
    print(f"Temperature: {imperial_adapter.get_temperature():.1f}°F")
    print(f"Wind Speed: {imperial_adapter.get_wind_speed():.1f} mph")
    print(f"Distance: {imperial_adapter.get_distance():.1f} miles")


if __name__ == '__main__':
    main()
