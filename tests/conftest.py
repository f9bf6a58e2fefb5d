# ABOUTME: Shared test fixtures for the OpenWeatherMap client test suite.
# ABOUTME: Provides sample API payloads shared across decoder and service tests.

import pytest


@pytest.fixture
def current_weather_payload() -> dict:
    """Current weather response for London as returned by /data/2.5/weather."""
    return {
        "coord": {"lon": -0.13, "lat": 51.51},
        "weather": [{"id": 300, "main": "Drizzle", "description": "light intensity drizzle", "icon": "09d"}],
        "base": "stations",
        "main": {"temp": 280.32, "pressure": 1012, "humidity": 81, "temp_min": 279.15, "temp_max": 281.15},
        "wind": {"speed": 4.1, "deg": 80, "gust": 7.2},
        "clouds": {"all": 90},
        "rain": {"3h": 0.5},
        "dt": 1485789600,
        "sys": {
            "type": 1,
            "id": 5091,
            "message": 0.0103,
            "country": "GB",
            "sunrise": 1485762037,
            "sunset": 1485794875,
        },
        "id": 2643743,
        "name": "London",
        "cod": 200,
    }


@pytest.fixture
def hourly_forecast_payload() -> dict:
    """Two-step forecast response as returned by /data/2.5/forecast. Note the string cod."""
    return {
        "cod": "200",
        "message": 0.0036,
        "cnt": 40,
        "list": [
            {
                "dt": 1485799200,
                "main": {
                    "temp": 261.45,
                    "temp_min": 259.086,
                    "temp_max": 261.45,
                    "pressure": 1023.48,
                    "sea_level": 1045.39,
                    "grnd_level": 1023.48,
                    "humidity": 79,
                    "temp_kf": 2.37,
                },
                "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "02n"}],
                "clouds": {"all": 8},
                "wind": {"speed": 4.77, "deg": 232.505},
                "sys": {"pod": "n"},
                "dt_txt": "2017-01-30 18:00:00",
            },
            {
                "dt": 1485810000,
                "main": {"temp": 261.41, "humidity": 76},
                "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01n"}],
                "clouds": {"all": 32},
                "wind": {"speed": 4.76, "deg": 240.503},
                "sys": {"pod": "n"},
                "dt_txt": "2017-01-30 21:00:00",
            },
        ],
        "city": {
            "id": 524901,
            "name": "Moscow",
            "coord": {"lat": 55.7522, "lon": 37.6156},
            "country": "RU",
            "population": 10381222,
        },
    }


@pytest.fixture
def daily_forecast_payload() -> dict:
    """Two-day response as returned by /data/2.5/forecast/daily."""
    return {
        "cod": "200",
        "message": 0.0032,
        "city": {"id": 1851632, "name": "Shuzenji", "coord": {"lon": 138.933334, "lat": 34.966671}, "country": "JP"},
        "cnt": 2,
        "list": [
            {
                "dt": 1406080800,
                "temp": {"day": 297.77, "min": 293.52, "max": 297.77, "night": 293.52, "eve": 297.77, "morn": 297.77},
                "pressure": 925.04,
                "humidity": 76,
                "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
                "speed": 1.21,
                "deg": 244,
                "clouds": 64,
                "rain": 3.5,
            },
            {
                "dt": 1406167200,
                "temp": {"day": 295.4, "min": 292.3},
                "pressure": 924.5,
                "humidity": 80,
                "weather": [],
                "speed": 0.9,
                "deg": 190,
                "clouds": 100,
                "snow": 0.25,
            },
        ],
    }
