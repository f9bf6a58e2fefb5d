# ABOUTME: Service layer for OpenWeatherMap API calls and response decoding.
# ABOUTME: Handles current weather, hourly forecast, and daily forecast retrieval.

import logging

import httpx

from owm.address import OWMAddress
from owm.decoders import decode_current_weather, decode_daily_forecast, decode_hourly_forecast, parse_json
from owm.models import CurrentWeather, DailyForecast, HourlyForecast

logger = logging.getLogger(__name__)


async def fetch_raw(client: httpx.AsyncClient, url: str) -> str | None:
    """GET a URL and return the body text, or None on any failure."""
    try:
        resp = await client.get(url)
    except httpx.HTTPError as e:
        logger.error("Request to %s failed: %s", _redact(url), e)
        return None

    if resp.status_code != httpx.codes.OK:
        logger.warning("Bad response %s from %s: %s", resp.status_code, _redact(url), resp.text[:500])
        return None
    return resp.text


def current_weather_from_raw_response(text: str | None) -> CurrentWeather:
    return decode_current_weather(parse_json(text), raw=text)


def hourly_forecast_from_raw_response(text: str | None) -> HourlyForecast:
    return decode_hourly_forecast(parse_json(text), raw=text)


def daily_forecast_from_raw_response(text: str | None) -> DailyForecast:
    return decode_daily_forecast(parse_json(text), raw=text)


async def current_weather_by_city_name(
    client: httpx.AsyncClient,
    address: OWMAddress,
    city_name: str,
    country_code: str | None = None,
) -> CurrentWeather:
    """Fetch current weather for a city name, optionally qualified by country code."""
    text = await fetch_raw(client, address.current_weather_by_city_name(city_name, country_code))
    return current_weather_from_raw_response(text)


async def current_weather_by_city_code(client: httpx.AsyncClient, address: OWMAddress, city_code: int) -> CurrentWeather:
    text = await fetch_raw(client, address.current_weather_by_city_code(city_code))
    return current_weather_from_raw_response(text)


async def current_weather_by_coordinates(
    client: httpx.AsyncClient,
    address: OWMAddress,
    latitude: float,
    longitude: float,
) -> CurrentWeather:
    text = await fetch_raw(client, address.current_weather_by_coordinates(latitude, longitude))
    return current_weather_from_raw_response(text)


async def hourly_forecast_by_city_name(
    client: httpx.AsyncClient,
    address: OWMAddress,
    city_name: str,
    country_code: str | None = None,
) -> HourlyForecast:
    """Fetch the 5 day / 3 hour forecast for a city name."""
    text = await fetch_raw(client, address.hourly_forecast_by_city_name(city_name, country_code))
    return hourly_forecast_from_raw_response(text)


async def hourly_forecast_by_city_code(client: httpx.AsyncClient, address: OWMAddress, city_code: int) -> HourlyForecast:
    text = await fetch_raw(client, address.hourly_forecast_by_city_code(city_code))
    return hourly_forecast_from_raw_response(text)


async def hourly_forecast_by_coordinates(
    client: httpx.AsyncClient,
    address: OWMAddress,
    latitude: float,
    longitude: float,
) -> HourlyForecast:
    text = await fetch_raw(client, address.hourly_forecast_by_coordinates(latitude, longitude))
    return hourly_forecast_from_raw_response(text)


async def daily_forecast_by_city_name(
    client: httpx.AsyncClient,
    address: OWMAddress,
    city_name: str,
    count: int,
    country_code: str | None = None,
) -> DailyForecast:
    """Fetch a daily forecast of `count` days for a city name."""
    text = await fetch_raw(client, address.daily_forecast_by_city_name(city_name, count, country_code))
    return daily_forecast_from_raw_response(text)


async def daily_forecast_by_city_code(
    client: httpx.AsyncClient,
    address: OWMAddress,
    city_code: int,
    count: int,
) -> DailyForecast:
    text = await fetch_raw(client, address.daily_forecast_by_city_code(city_code, count))
    return daily_forecast_from_raw_response(text)


async def daily_forecast_by_coordinates(
    client: httpx.AsyncClient,
    address: OWMAddress,
    latitude: float,
    longitude: float,
    count: int,
) -> DailyForecast:
    text = await fetch_raw(client, address.daily_forecast_by_coordinates(latitude, longitude, count))
    return daily_forecast_from_raw_response(text)


def _redact(url: str) -> str:
    """Hide the API key when logging a request URL."""
    parsed = httpx.URL(url)
    if "appid" not in parsed.params:
        return url
    return str(parsed.copy_set_param("appid", "***"))
