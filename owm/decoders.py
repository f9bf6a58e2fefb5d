# ABOUTME: Pure decoders from OpenWeatherMap JSON objects to the immutable models.
# ABOUTME: Missing or mistyped fields decode to None; only unparseable text raises.

import json
import logging
import math
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, TypeVar

from owm.errors import MalformedResponseError
from owm.models import (
    City,
    Clouds,
    Coord,
    CurrentWeather,
    DailyForecast,
    DailyForecastEntry,
    DailyTemperature,
    HourlyForecast,
    HourlyForecastEntry,
    HourlySys,
    Main,
    Rain,
    Snow,
    Sys,
    Weather,
    Wind,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_json(text: str | None) -> dict | None:
    """Parse raw response text into a JSON object, passing None through."""
    if text is None:
        return None
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise MalformedResponseError(f"Response is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedResponseError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def decode_current_weather(data: dict | None, raw: str | None = None) -> CurrentWeather:
    """Decode a current weather response. None gives an all-absent instance."""
    if data is None:
        return CurrentWeather()

    return CurrentWeather(
        response_code=_opt_int(data, "cod"),
        raw_response=raw if raw is not None else _compact_json(data),
        date_time=_opt_timestamp(data, "dt"),
        weather=_decode_list(data, "weather", decode_weather),
        base_station=_opt_str(data, "base", empty_is_absent=True),
        city_code=_opt_int(data, "id"),
        city_name=_opt_str(data, "name", empty_is_absent=True),
        clouds=_decode_child(data, "clouds", decode_clouds),
        coord=_decode_child(data, "coord", decode_coord),
        main=_decode_child(data, "main", decode_main),
        rain=_decode_child(data, "rain", decode_rain),
        snow=_decode_child(data, "snow", decode_snow),
        sys=_decode_child(data, "sys", decode_sys),
        wind=_decode_child(data, "wind", decode_current_wind),
    )


def decode_hourly_forecast(data: dict | None, raw: str | None = None) -> HourlyForecast:
    """Decode a 5 day / 3 hour forecast response."""
    if data is None:
        return HourlyForecast()

    return HourlyForecast(
        response_code=_opt_int(data, "cod"),
        raw_response=raw if raw is not None else _compact_json(data),
        message=_opt_float(data, "message"),
        city=decode_city(_opt_object(data, "city")),
        declared_count=_opt_int(data, "cnt"),
        forecasts=_decode_list(data, "list", decode_hourly_entry),
    )


def decode_daily_forecast(data: dict | None, raw: str | None = None) -> DailyForecast:
    """Decode a daily forecast response."""
    if data is None:
        return DailyForecast()

    return DailyForecast(
        response_code=_opt_int(data, "cod"),
        raw_response=raw if raw is not None else _compact_json(data),
        message=_opt_float(data, "message"),
        city=decode_city(_opt_object(data, "city")),
        declared_count=_opt_int(data, "cnt"),
        forecasts=_decode_list(data, "list", decode_daily_entry),
    )


def decode_weather(data: dict) -> Weather:
    return Weather(
        code=_opt_int(data, "id"),
        name=_opt_str(data, "main", empty_is_absent=True),
        description=_opt_str(data, "description", empty_is_absent=True),
        icon=_opt_str(data, "icon", empty_is_absent=True),
    )


def decode_clouds(data: dict) -> Clouds:
    return Clouds(percentage=_opt_float(data, "all"))


def decode_coord(data: dict) -> Coord:
    return Coord(latitude=_opt_float(data, "lat"), longitude=_opt_float(data, "lon"))


def decode_main(data: dict) -> Main:
    return Main(
        temperature=_opt_float(data, "temp"),
        min_temperature=_opt_float(data, "temp_min"),
        max_temperature=_opt_float(data, "temp_max"),
        pressure=_opt_float(data, "pressure"),
        humidity=_opt_float(data, "humidity"),
    )


def decode_hourly_main(data: dict) -> Main:
    return decode_main(data).model_copy(
        update={
            "sea_level": _opt_float(data, "sea_level"),
            "ground_level": _opt_float(data, "grnd_level"),
            "temp_kf": _opt_float(data, "temp_kf"),
        }
    )


def decode_wind(data: dict) -> Wind:
    return Wind(speed=_opt_float(data, "speed"), degree=_opt_float(data, "deg"))


def decode_current_wind(data: dict) -> Wind:
    return decode_wind(data).model_copy(update={"gust": _opt_float(data, "gust")})


def decode_rain(data: dict) -> Rain:
    return Rain(one_hour=_opt_float(data, "1h"), three_hours=_opt_float(data, "3h"))


def decode_snow(data: dict) -> Snow:
    return Snow(one_hour=_opt_float(data, "1h"), three_hours=_opt_float(data, "3h"))


def decode_sys(data: dict) -> Sys:
    return Sys(
        type=_opt_int(data, "type"),
        id=_opt_int(data, "id"),
        message=_opt_float(data, "message"),
        country_code=_opt_str(data, "country", empty_is_absent=True),
        sunrise=_opt_timestamp(data, "sunrise"),
        sunset=_opt_timestamp(data, "sunset"),
    )


def decode_hourly_sys(data: dict) -> HourlySys:
    return HourlySys(pod=_opt_str(data, "pod", empty_is_absent=True))


def decode_city(data: dict | None) -> City:
    """Decode the city block of a forecast. None gives an all-absent City."""
    if data is None:
        return City()
    return City(
        code=_opt_int(data, "id"),
        name=_opt_str(data, "name"),
        country_code=_opt_str(data, "country"),
        population=_opt_int(data, "population"),
        coord=_decode_child(data, "coord", decode_coord),
    )


def decode_hourly_entry(data: dict) -> HourlyForecastEntry:
    return HourlyForecastEntry(
        date_time=_opt_timestamp(data, "dt"),
        date_time_text=_opt_str(data, "dt_txt"),
        weather=_decode_list(data, "weather", decode_weather),
        clouds=_decode_child(data, "clouds", decode_clouds),
        main=_decode_child(data, "main", decode_hourly_main),
        sys=_decode_child(data, "sys", decode_hourly_sys),
        wind=_decode_child(data, "wind", decode_wind),
    )


def decode_daily_temperature(data: dict | None) -> DailyTemperature:
    if data is None:
        return DailyTemperature()
    return DailyTemperature(
        day=_opt_float(data, "day"),
        minimum=_opt_float(data, "min"),
        maximum=_opt_float(data, "max"),
        night=_opt_float(data, "night"),
        evening=_opt_float(data, "eve"),
        morning=_opt_float(data, "morn"),
    )


def decode_daily_entry(data: dict) -> DailyForecastEntry:
    return DailyForecastEntry(
        date_time=_opt_timestamp(data, "dt"),
        weather=_decode_list(data, "weather", decode_weather),
        pressure=_opt_float(data, "pressure"),
        humidity=_opt_float(data, "humidity"),
        wind_speed=_opt_float(data, "speed"),
        wind_degree=_opt_float(data, "deg"),
        clouds_percentage=_opt_float(data, "clouds"),
        rain=_opt_float(data, "rain"),
        snow=_opt_float(data, "snow"),
        temperature=decode_daily_temperature(_opt_object(data, "temp")),
    )


def _compact_json(data: dict) -> str:
    return json.dumps(data, separators=(",", ":"))


def _opt_object(data: dict, key: str) -> dict | None:
    value = data.get(key)
    return value if isinstance(value, dict) else None


def _decode_child(data: dict, key: str, decoder: Callable[[dict], T]) -> T | None:
    """Decode a nested object only if its key holds an object."""
    child = _opt_object(data, key)
    if child is None:
        return None
    return decoder(child)


def _decode_list(data: dict, key: str, decoder: Callable[[dict], T]) -> tuple[T, ...]:
    """Decode each object element of a list, skipping anything that is not an object."""
    items = data.get(key)
    if not isinstance(items, list):
        return ()

    result = tuple(decoder(item) for item in items if isinstance(item, dict))
    skipped = len(items) - len(result)
    if skipped:
        logger.debug("Skipped %d non-object element(s) in '%s'", skipped, key)
    return result


def _opt_float(data: dict, key: str) -> float | None:
    """Read a number that may be sent as int, float, or numeric string."""
    value: Any = data.get(key)
    if isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (OverflowError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _opt_int(data: dict, key: str) -> int | None:
    value = data.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    number = _opt_float(data, key)
    return int(number) if number is not None else None


def _opt_str(data: dict, key: str, empty_is_absent: bool = False) -> str | None:
    value = data.get(key)
    if not isinstance(value, str):
        return None
    if empty_is_absent and value == "":
        return None
    return value


def _opt_timestamp(data: dict, key: str) -> datetime | None:
    """Convert epoch seconds to an aware UTC datetime."""
    seconds = _opt_int(data, key)
    if seconds is None:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        logger.debug("Timestamp out of range for '%s': %s", key, seconds)
        return None
