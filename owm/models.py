# ABOUTME: Pydantic BaseModels for OpenWeatherMap current weather and forecast responses.
# ABOUTME: Every optional field is None when absent; has() is the single presence check.

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class OWMModel(BaseModel):
    """Immutable base for all decoded entities."""

    model_config = ConfigDict(frozen=True)

    def has(self, field: str) -> bool:
        """Return True if the named field was present in the decoded payload.

        Sequences count as present when non-empty.
        """
        value = getattr(self, field)
        if isinstance(value, tuple):
            return len(value) > 0
        return value is not None


class Weather(OWMModel):
    """One weather condition (id, group name, description, icon)."""

    code: int | None = None
    name: str | None = None
    description: str | None = None
    icon: str | None = None


class Clouds(OWMModel):
    percentage: float | None = None


class Coord(OWMModel):
    latitude: float | None = None
    longitude: float | None = None


class Main(OWMModel):
    """Temperature, pressure and humidity block.

    sea_level, ground_level and temp_kf are only sent with hourly forecasts.
    """

    temperature: float | None = None
    min_temperature: float | None = None
    max_temperature: float | None = None
    pressure: float | None = None
    humidity: float | None = None
    sea_level: float | None = None
    ground_level: float | None = None
    temp_kf: float | None = None


class Wind(OWMModel):
    """Wind block. gust is only sent with current weather."""

    speed: float | None = None
    degree: float | None = None
    gust: float | None = None

    def has(self, field: str) -> bool:
        # A bearing without a speed is meaningless
        if field == "degree":
            return self.speed is not None and self.degree is not None
        return super().has(field)

    @property
    def has_degree(self) -> bool:
        return self.has("degree")


class Precipitation(OWMModel):
    """Accumulated volume over the last one and three hours."""

    one_hour: float | None = None
    three_hours: float | None = None


class Rain(Precipitation):
    pass


class Snow(Precipitation):
    pass


class Sys(OWMModel):
    """Country and sun times attached to a current weather response."""

    type: int | None = None
    id: int | None = None
    message: float | None = None
    country_code: str | None = None
    sunrise: datetime | None = None
    sunset: datetime | None = None


class HourlySys(OWMModel):
    """Part of day ("d" or "n") for an hourly forecast entry."""

    pod: str | None = None


class City(OWMModel):
    code: int | None = None
    name: str | None = None
    country_code: str | None = None
    population: int | None = None
    coord: Coord | None = None


class ResponseEnvelope(OWMModel):
    """Status metadata shared by every response kind."""

    response_code: int | None = None
    raw_response: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.response_code == 200

    @property
    def has_response_code(self) -> bool:
        return self.has("response_code")

    @property
    def has_raw_response(self) -> bool:
        return self.has("raw_response")


class CurrentWeather(ResponseEnvelope):
    """Decoded response of the current weather endpoint."""

    date_time: datetime | None = None
    weather: tuple[Weather, ...] = ()
    base_station: str | None = None
    city_code: int | None = None
    city_name: str | None = None
    clouds: Clouds | None = None
    coord: Coord | None = None
    main: Main | None = None
    rain: Rain | None = None
    snow: Snow | None = None
    sys: Sys | None = None
    wind: Wind | None = None

    @property
    def weather_count(self) -> int:
        return len(self.weather)


class HourlyForecastEntry(OWMModel):
    """One three-hour step of the hourly forecast."""

    date_time: datetime | None = None
    date_time_text: str | None = None
    weather: tuple[Weather, ...] = ()
    clouds: Clouds | None = None
    main: Main | None = None
    sys: HourlySys | None = None
    wind: Wind | None = None


class DailyTemperature(OWMModel):
    """Temperature at each time of day."""

    day: float | None = None
    minimum: float | None = None
    maximum: float | None = None
    night: float | None = None
    evening: float | None = None
    morning: float | None = None


class DailyForecastEntry(OWMModel):
    """One day of the daily forecast. Wind, clouds and precipitation are flat values here."""

    date_time: datetime | None = None
    weather: tuple[Weather, ...] = ()
    pressure: float | None = None
    humidity: float | None = None
    wind_speed: float | None = None
    wind_degree: float | None = None
    clouds_percentage: float | None = None
    rain: float | None = None
    snow: float | None = None
    temperature: DailyTemperature = DailyTemperature()


class ForecastEnvelope(ResponseEnvelope):
    """Fields shared by hourly and daily forecast responses.

    declared_count is the payload's own "cnt"; forecast_count counts the entries that decoded.
    """

    message: float | None = None
    city: City | None = None
    declared_count: int | None = None

    @property
    def has_declared_count(self) -> bool:
        return self.has("declared_count")

    @property
    def forecast_count(self) -> int:
        return len(self.forecasts)


class HourlyForecast(ForecastEnvelope):
    forecasts: tuple[HourlyForecastEntry, ...] = ()


class DailyForecast(ForecastEnvelope):
    forecasts: tuple[DailyForecastEntry, ...] = ()
