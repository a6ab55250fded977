"""Pydantic models for the Weather Underground API response.

One request returns a single document with a top-level key per feature. Every
field has a default so features that were not requested decode to empty
sub-structures. Most values are kept as the display strings the API sends;
numbers are coerced to strings and JSON nulls fall back to the default.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class WuModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# Shared pieces

class Date(WuModel):
    pretty: str = ""
    hour: str = ""
    min: str = ""
    mon: str = ""
    mday: str = ""
    year: str = ""
    tzname: str = ""


class Clock(WuModel):
    hour: str = ""
    minute: str = ""


class Degrees(WuModel):
    """Temperature pair as forecast and almanac data spell it."""

    fahrenheit: str = ""
    celsius: str = ""


class DegreesFC(WuModel):
    fahrenheit: str = Field("", alias="F")
    celsius: str = Field("", alias="C")


# Response envelope

class ApiErrorInfo(WuModel):
    type: str = ""
    description: str = ""


class LocationMatch(WuModel):
    name: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    country_iso3166: str = ""
    country_name: str = ""
    zmw: str = ""
    link: str = Field("", alias="l")


class Envelope(WuModel):
    version: str = ""
    terms_of_service: str = Field("", alias="termsofService")
    features: dict[str, Any] = Field(default_factory=dict)
    error: ApiErrorInfo | None = None
    results: list[LocationMatch] = Field(default_factory=list)


# alerts

class Alert(WuModel):
    type: str = ""
    description: str = ""
    date: str = ""
    expires: str = ""
    message: str = ""
    phenomena: str = ""
    significance: str = ""


# almanac

class AlmanacTemp(WuModel):
    normal: DegreesFC = DegreesFC()
    record: DegreesFC = DegreesFC()
    recordyear: str = ""


class Almanac(WuModel):
    airport_code: str = ""
    temp_high: AlmanacTemp = AlmanacTemp()
    temp_low: AlmanacTemp = AlmanacTemp()


# conditions

class DisplayLocation(WuModel):
    full: str = ""
    city: str = ""
    state: str = ""
    state_name: str = ""
    country: str = ""
    zip: str = ""
    latitude: str = ""
    longitude: str = ""
    elevation: str = ""


class CurrentObservation(WuModel):
    display_location: DisplayLocation = DisplayLocation()
    observation_location: DisplayLocation = DisplayLocation()
    station_id: str = ""
    observation_time: str = ""
    weather: str = ""
    temperature_string: str = ""
    temp_f: str = ""
    temp_c: str = ""
    relative_humidity: str = ""
    wind_string: str = ""
    wind_dir: str = ""
    wind_mph: str = ""
    wind_gust_mph: str = ""
    pressure_mb: str = ""
    pressure_in: str = ""
    pressure_trend: str = ""
    dewpoint_string: str = ""
    heat_index_string: str = ""
    windchill_string: str = ""
    feelslike_string: str = ""
    visibility_mi: str = ""
    visibility_km: str = ""
    uv: str = Field("", alias="UV")
    precip_today_string: str = ""


# forecast / forecast10day

class TxtForecastDay(WuModel):
    period: int = 0
    title: str = ""
    fcttext: str = ""
    fcttext_metric: str = ""
    pop: str = ""


class TxtForecast(WuModel):
    date: str = ""
    forecastday: list[TxtForecastDay] = Field(default_factory=list)


class ForecastDate(WuModel):
    pretty: str = ""
    day: str = ""
    month: str = ""
    year: str = ""
    monthname: str = ""
    weekday: str = ""
    weekday_short: str = ""


class Precip(WuModel):
    inches: str = Field("", alias="in")
    mm: str = ""


class Wind(WuModel):
    mph: str = ""
    kph: str = ""
    dir: str = ""


class SimpleForecastDay(WuModel):
    date: ForecastDate = ForecastDate()
    period: int = 0
    high: Degrees = Degrees()
    low: Degrees = Degrees()
    conditions: str = ""
    pop: str = ""
    qpf_allday: Precip = Precip()
    avehumidity: str = ""
    maxwind: Wind = Wind()


class SimpleForecast(WuModel):
    forecastday: list[SimpleForecastDay] = Field(default_factory=list)


class Forecast(WuModel):
    txt_forecast: TxtForecast = TxtForecast()
    simpleforecast: SimpleForecast = SimpleForecast()


# history / yesterday

class HistoryObservation(WuModel):
    date: Date = Date()
    tempi: str = ""
    tempm: str = ""
    conds: str = ""
    hum: str = ""
    wspdi: str = ""
    wdire: str = ""
    pressurei: str = ""
    precipi: str = ""


class DailySummary(WuModel):
    date: Date = Date()
    fog: str = ""
    rain: str = ""
    snow: str = ""
    hail: str = ""
    thunder: str = ""
    tornado: str = ""
    meantempi: str = ""
    meantempm: str = ""
    maxtempi: str = ""
    maxtempm: str = ""
    mintempi: str = ""
    mintempm: str = ""
    humidity: str = ""
    meanwindspdi: str = ""
    meanwdire: str = ""
    maxwspdi: str = ""
    precipi: str = ""
    precipm: str = ""
    snowfalli: str = ""


class History(WuModel):
    date: Date = Date()
    observations: list[HistoryObservation] = Field(default_factory=list)
    dailysummary: list[DailySummary] = Field(default_factory=list)


# geolookup

class AirportStation(WuModel):
    city: str = ""
    state: str = ""
    country: str = ""
    icao: str = ""
    lat: str = ""
    lon: str = ""


class PwsStation(WuModel):
    neighborhood: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    id: str = ""
    distance_km: str = ""
    distance_mi: str = ""


class AirportStations(WuModel):
    station: list[AirportStation] = Field(default_factory=list)


class PwsStations(WuModel):
    station: list[PwsStation] = Field(default_factory=list)


class NearbyStations(WuModel):
    airport: AirportStations = AirportStations()
    pws: PwsStations = PwsStations()


class Location(WuModel):
    type: str = ""
    country: str = ""
    country_name: str = ""
    state: str = ""
    city: str = ""
    tz_long: str = ""
    lat: str = ""
    lon: str = ""
    zip: str = ""
    nearby_weather_stations: NearbyStations = NearbyStations()


# astronomy

class MoonPhase(WuModel):
    percent_illuminated: str = Field("", alias="percentIlluminated")
    age_of_moon: str = Field("", alias="ageOfMoon")
    phase_of_moon: str = Field("", alias="phaseofMoon")
    hemisphere: str = ""
    current_time: Clock = Clock()
    sunrise: Clock = Clock()
    sunset: Clock = Clock()


class SunPhase(WuModel):
    sunrise: Clock = Clock()
    sunset: Clock = Clock()


# tide

class TideInfo(WuModel):
    tide_site: str = Field("", alias="tideSite")
    lat: str = ""
    lon: str = ""
    units: str = ""
    type: str = ""
    tzname: str = ""


class TideData(WuModel):
    height: str = ""
    type: str = ""


class TideSummary(WuModel):
    date: Date = Date()
    data: TideData = TideData()


class TideStats(WuModel):
    maxheight: str = ""
    minheight: str = ""


class Tide(WuModel):
    tide_info: list[TideInfo] = Field(default_factory=list, alias="tideInfo")
    tide_summary: list[TideSummary] = Field(default_factory=list, alias="tideSummary")
    tide_summary_stats: list[TideStats] = Field(default_factory=list, alias="tideSummaryStats")


# planner

class TripDate(WuModel):
    date: Date = Date()


class PeriodOfRecord(WuModel):
    date_start: TripDate = TripDate()
    date_end: TripDate = TripDate()


class TempRange(WuModel):
    min: DegreesFC = DegreesFC()
    avg: DegreesFC = DegreesFC()
    max: DegreesFC = DegreesFC()


class PrecipAmount(WuModel):
    inches: str = Field("", alias="in")
    cm: str = ""


class PrecipRange(WuModel):
    min: PrecipAmount = PrecipAmount()
    avg: PrecipAmount = PrecipAmount()
    max: PrecipAmount = PrecipAmount()


class Chance(WuModel):
    name: str = ""
    description: str = ""
    percentage: str = ""


class CloudCover(WuModel):
    cond: str = ""


class Trip(WuModel):
    title: str = ""
    airport_code: str = ""
    error: str = ""
    period_of_record: PeriodOfRecord = PeriodOfRecord()
    temp_high: TempRange = TempRange()
    temp_low: TempRange = TempRange()
    precip: PrecipRange = PrecipRange()
    dewpoint_high: TempRange = TempRange()
    dewpoint_low: TempRange = TempRange()
    cloud_cover: CloudCover = CloudCover()
    chance_of: dict[str, Chance] = Field(default_factory=dict)


# The whole document

class CompositeObservation(WuModel):
    response: Envelope = Envelope()
    alerts: list[Alert] = Field(default_factory=list)
    almanac: Almanac = Almanac()
    current_observation: CurrentObservation = CurrentObservation()
    forecast: Forecast = Forecast()
    history: History = History()
    location: Location = Location()
    moon_phase: MoonPhase = MoonPhase()
    sun_phase: SunPhase = SunPhase()
    tide: Tide = Tide()
    trip: Trip = Trip()
