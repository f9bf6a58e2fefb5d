# ABOUTME: Command-line entry point that fetches and prints weather for a city.
# ABOUTME: Reads OWM_* settings from the environment and runs the async service calls.

import argparse
import asyncio
import logging
import sys

from owm.deps import OWMSettings, create_http_client, load_settings
from owm.directions import degree_to_direction
from owm.errors import InvalidArgumentError, OWMError
from owm.models import CurrentWeather, DailyForecast, HourlyForecast, Wind
from owm.weather_service import current_weather_by_city_name, daily_forecast_by_city_name, hourly_forecast_by_city_name

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("owm", description="Show OpenWeatherMap data for a city")
    parser.add_argument("--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    for name in ("current", "hourly", "daily"):
        cmd = sub.add_parser(name)
        cmd.add_argument("city")
        cmd.add_argument("--country", default=None, help="ISO country code, e.g. UK")
        if name == "daily":
            cmd.add_argument("--count", type=int, default=7, help="Number of days (1-255)")
    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def format_wind(wind: Wind | None) -> str:
    if wind is None or not wind.has("speed"):
        return "n/a"
    text = f"{wind.speed:.1f}"
    if wind.has_degree:
        try:
            text += f" {degree_to_direction(wind.degree)}"
        except InvalidArgumentError:
            text += f" {wind.degree:g} deg"
    return text


def format_current(cw: CurrentWeather) -> list[str]:
    lines = [f"City: {cw.city_name if cw.has('city_name') else 'unknown'}"]
    if cw.has("date_time"):
        lines.append(f"Observed: {cw.date_time.isoformat()}")
    for weather in cw.weather:
        lines.append(f"Weather: {weather.name} - {weather.description}")
    if cw.main is not None and cw.main.has("temperature"):
        lines.append(f"Temperature: {cw.main.temperature:.1f}")
    lines.append(f"Wind: {format_wind(cw.wind)}")
    return lines


def format_hourly(hf: HourlyForecast) -> list[str]:
    city = hf.city.name if hf.city is not None and hf.city.has("name") else "unknown"
    lines = [f"City: {city}", f"Forecasts: {hf.forecast_count}"]
    for entry in hf.forecasts:
        when = entry.date_time_text or (entry.date_time.isoformat() if entry.has("date_time") else "?")
        temp = f"{entry.main.temperature:.1f}" if entry.main is not None and entry.main.has("temperature") else "n/a"
        lines.append(f"{when}: {temp}, wind {format_wind(entry.wind)}")
    return lines


def format_daily(df: DailyForecast) -> list[str]:
    city = df.city.name if df.city is not None and df.city.has("name") else "unknown"
    lines = [f"City: {city}", f"Forecasts: {df.forecast_count}"]
    for entry in df.forecasts:
        when = entry.date_time.date().isoformat() if entry.has("date_time") else "?"
        temp = entry.temperature
        low = f"{temp.minimum:.1f}" if temp.has("minimum") else "n/a"
        high = f"{temp.maximum:.1f}" if temp.has("maximum") else "n/a"
        lines.append(f"{when}: min {low}, max {high}")
    return lines


async def run(args: argparse.Namespace, settings: OWMSettings) -> list[str]:
    address = settings.address()
    async with create_http_client(settings) as client:
        if args.command == "current":
            cw = await current_weather_by_city_name(client, address, args.city, args.country)
            response, lines = cw, format_current(cw)
        elif args.command == "hourly":
            hf = await hourly_forecast_by_city_name(client, address, args.city, args.country)
            response, lines = hf, format_hourly(hf)
        else:
            df = await daily_forecast_by_city_name(client, address, args.city, args.count, args.country)
            response, lines = df, format_daily(df)

    if not response.is_valid:
        raise OWMError(f"Invalid response (code {response.response_code})")
    return lines


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    try:
        settings = load_settings()
    except ValueError as e:
        logger.error("Invalid OWM_* configuration: %s", e)
        return 1
    if not settings.api_key:
        logger.error("Missing OWM_API_KEY in environment")
        return 1

    try:
        lines = asyncio.run(run(args, settings))
    except OWMError as e:
        logger.error("%s", e)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
