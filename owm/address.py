# ABOUTME: Request URL construction for the OpenWeatherMap 2.5 API.
# ABOUTME: OWMAddress is an immutable config value holding key, units, and language.

from enum import Enum

import httpx
from pydantic import BaseModel, ConfigDict

from owm.errors import InvalidArgumentError

API_URL = "http://api.openweathermap.org/data/2.5/"
CURRENT_WEATHER_PATH = "weather"
HOURLY_FORECAST_PATH = "forecast"
DAILY_FORECAST_PATH = "forecast/daily"

MAX_DAILY_COUNT = 255


class Units(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class Language(str, Enum):
    ENGLISH = "en"
    RUSSIAN = "ru"
    ITALIAN = "it"
    SPANISH = "es"
    UKRAINIAN = "uk"
    GERMAN = "de"
    PORTUGUESE = "pt"
    ROMANIAN = "ro"
    POLISH = "pl"
    FINNISH = "fi"
    DUTCH = "nl"
    FRENCH = "fr"
    BULGARIAN = "bg"
    SWEDISH = "sv"
    CHINESE_TRADITIONAL = "zh_tw"
    CHINESE_SIMPLIFIED = "zh"
    TURKISH = "tr"
    CROATIAN = "hr"
    CATALAN = "ca"


class OWMAddress(BaseModel):
    """Builds request URLs for current weather, hourly forecast, and daily forecast."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    units: Units = Units.IMPERIAL
    lang: Language = Language.ENGLISH
    mode: str = "json"
    base_url: str = API_URL

    def current_weather_by_city_name(self, city_name: str, country_code: str | None = None) -> str:
        return self._build(CURRENT_WEATHER_PATH, {"q": _city_query(city_name, country_code)})

    def current_weather_by_city_code(self, city_code: int) -> str:
        return self._build(CURRENT_WEATHER_PATH, {"id": city_code})

    def current_weather_by_coordinates(self, latitude: float, longitude: float) -> str:
        return self._build(CURRENT_WEATHER_PATH, {"lat": latitude, "lon": longitude})

    def hourly_forecast_by_city_name(self, city_name: str, country_code: str | None = None) -> str:
        return self._build(HOURLY_FORECAST_PATH, {"q": _city_query(city_name, country_code)})

    def hourly_forecast_by_city_code(self, city_code: int) -> str:
        return self._build(HOURLY_FORECAST_PATH, {"id": city_code})

    def hourly_forecast_by_coordinates(self, latitude: float, longitude: float) -> str:
        return self._build(HOURLY_FORECAST_PATH, {"lat": latitude, "lon": longitude})

    def daily_forecast_by_city_name(self, city_name: str, count: int, country_code: str | None = None) -> str:
        return self._build(DAILY_FORECAST_PATH, {"q": _city_query(city_name, country_code)}, count)

    def daily_forecast_by_city_code(self, city_code: int, count: int) -> str:
        return self._build(DAILY_FORECAST_PATH, {"id": city_code}, count)

    def daily_forecast_by_coordinates(self, latitude: float, longitude: float, count: int) -> str:
        return self._build(DAILY_FORECAST_PATH, {"lat": latitude, "lon": longitude}, count)

    def _build(self, path: str, location: dict, count: int | None = None) -> str:
        """Join location, count, mode, units, lang, and appid into a full URL."""
        params = dict(location)
        if count is not None:
            if not 1 <= count <= MAX_DAILY_COUNT:
                raise InvalidArgumentError(f"Forecast count must be between 1 and {MAX_DAILY_COUNT}, got {count}")
            params["cnt"] = count
        params.update(
            {
                "mode": self.mode,
                "units": self.units.value,
                "lang": self.lang.value,
                "appid": self.api_key,
            }
        )
        return str(httpx.URL(self.base_url + path, params=params))


def _city_query(city_name: str, country_code: str | None) -> str:
    if country_code:
        return f"{city_name},{country_code}"
    return city_name
