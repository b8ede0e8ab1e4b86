# Copyright (c) Meta Platforms, Inc. and affiliates
import pytest

from structural import adapter, bridge, proxy
from structural.adapter import ImperialWeatherAdapter, MetricWeatherService, WeatherService
from structural.bridge import TV, AdvancedRemote, BasicRemote, Radio
from structural.proxy import ProxyImage, RealImage


class TestAdapter:

    def test_metric_readings(self):
        service = MetricWeatherService()
        assert service.get_temperature() == 25.0
        assert service.get_wind_speed() == 15.0
        assert service.get_distance() == 100.0

    def test_imperial_conversion(self):
        imperial = ImperialWeatherAdapter(MetricWeatherService())
        assert isinstance(imperial, WeatherService)
        assert imperial.get_temperature() == pytest.approx(77.0)
        assert imperial.get_wind_speed() == pytest.approx(9.320565)
        assert imperial.get_distance() == pytest.approx(62.1371)

    def test_main(self, capsys):
        adapter.main()
        out = capsys.readouterr().out
        assert "Temperature: 25.0°C" in out
        assert "Temperature: 77.0°F" in out
        assert "Wind Speed: 9.3 mph" in out
        assert "Distance: 62.1 miles" in out


class TestBridge:

    def test_defaults(self):
        tv, radio = TV(), Radio()
        assert (tv.get_volume(), tv.get_channel(), tv.is_enabled()) == (30, 1, False)
        assert (radio.get_volume(), radio.get_channel(), radio.is_enabled()) == (20, 87, False)

    def test_basic_remote(self):
        tv = TV()
        remote = BasicRemote(tv)
        remote.turn_on()
        remote.channel_up()
        remote.volume_up()
        assert tv.is_enabled()
        assert tv.get_channel() == 2
        assert tv.get_volume() == 40
        remote.turn_off()
        assert not tv.is_enabled()

    def test_volume_is_bounded(self):
        tv = TV()
        remote = BasicRemote(tv)
        remote.set_volume(100)
        remote.volume_up()
        assert tv.get_volume() == 100
        remote.set_volume(-5)
        assert tv.get_volume() == 100

    def test_radio_ignores_out_of_band_channels(self):
        radio = Radio()
        remote = BasicRemote(radio)
        remote.set_channel(120)
        assert radio.get_channel() == 87
        remote.channel_down()
        assert radio.get_channel() == 87
        remote.set_channel(108)
        assert radio.get_channel() == 108

    def test_advanced_remote(self, capsys):
        radio = Radio()
        remote = AdvancedRemote(radio)
        remote.mute()
        remote.save_channel(101)
        assert radio.get_volume() == 0
        assert radio.get_channel() == 101
        assert capsys.readouterr().out == "Saved channel 101 as favorite\n"

    def test_main(self, capsys):
        bridge.main()
        out = capsys.readouterr().out
        assert "TV Channel: 5" in out
        assert "TV Volume: 40" in out
        assert "TV Volume after mute: 0" in out
        assert "Radio Channel: 98" in out
        assert "Radio Volume: 30" in out


class TestProxy:

    def test_real_image_loads_on_construction(self, capsys):
        RealImage("photo.jpg")
        assert capsys.readouterr().out == "Loading image: photo.jpg\n"

    def test_proxy_loads_once(self, capsys):
        image = ProxyImage("photo.jpg")
        loads_before = RealImage.load_count
        assert not image.is_loaded
        assert capsys.readouterr().out == ""

        image.display()
        image.display()

        assert image.is_loaded
        assert RealImage.load_count == loads_before + 1
        assert capsys.readouterr().out.splitlines() == [
            "(Proxy) First time loading image...",
            "Loading image: photo.jpg",
            "Displaying image: photo.jpg",
            "(Proxy) Loading from cache...",
            "Displaying image: photo.jpg",
        ]

    def test_main(self, capsys):
        proxy.main()
        out = capsys.readouterr().out
        assert out.count("Loading image: high_resolution_photo.jpg") == 1
        assert out.count("Displaying image: high_resolution_photo.jpg") == 2
