import logging

import httpx

from locker_api.services.weather_service import WeatherService

WEATHER_URL = "https://weather.test/data/2.5/weather"


def _service(handler, api_key="test-key", enabled=True):
    return WeatherService(
        base_url=WEATHER_URL,
        api_key=api_key,
        timeout=1.0,
        enabled=enabled,
        transport=httpx.MockTransport(handler),
    )


def test_get_weather():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"main": {"temp": 12.3, "humidity": 55}})

    report = _service(handler).get_weather(37.55, 126.97)

    assert report.temperature == 12.3
    assert report.humidity == 55
    params = seen[0].url.params
    assert params["lat"] == "37.55"
    assert params["lon"] == "126.97"
    assert params["appid"] == "test-key"
    assert params["units"] == "metric"


def test_get_weather_timeout():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    assert _service(handler).get_weather(37.55, 126.97) is None


def test_get_weather_error_status():
    def handler(request):
        return httpx.Response(500, json={"message": "internal error"})

    assert _service(handler).get_weather(37.55, 126.97) is None


def test_get_weather_malformed_body():
    def handler(request):
        return httpx.Response(200, json={"weather": []})

    assert _service(handler).get_weather(37.55, 126.97) is None


def test_get_weather_not_configured():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={"main": {"temp": 1, "humidity": 1}})

    assert _service(handler, api_key="").get_weather(37.55, 126.97) is None
    assert _service(handler, enabled=False).get_weather(37.55, 126.97) is None
    assert calls == []


def test_get_weather_not_configured_logs_warning(caplog):
    def handler(request):
        return httpx.Response(200, json={"main": {"temp": 1, "humidity": 1}})

    with caplog.at_level(logging.WARNING, logger="locker_api.services.weather_service"):
        assert _service(handler, api_key="").get_weather(37.55, 126.97) is None

    assert any(record.levelno == logging.WARNING for record in caplog.records)


def test_get_weather_failure_logs_coordinates(caplog):
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with caplog.at_level(logging.WARNING, logger="locker_api.services.weather_service"):
        assert _service(handler).get_weather(37.55, 126.97) is None

    assert "Weather lookup failed for (37.55, 126.97)" in caplog.text
