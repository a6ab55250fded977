"""Shared test fixtures."""

import json

import pytest

from wu.api.schemas import CompositeObservation
from wu.config import Config


@pytest.fixture
def config() -> Config:
    return Config(key="abc123", station="KLNK")


@pytest.fixture
def sample_payload() -> dict:
    """Trimmed conditions + forecast + astronomy + history response."""
    return {
        "response": {
            "version": "0.1",
            "termsofService": "http://www.wunderground.com/weather/api/d/terms.html",
            "features": {"conditions": 1, "forecast": 1, "astronomy": 1, "history": 1},
        },
        "current_observation": {
            "display_location": {"full": "Lincoln, NE", "city": "Lincoln", "state": "NE"},
            "observation_location": {"full": "Lincoln Municipal, Nebraska"},
            "station_id": "KLNK",
            "observation_time": "Last Updated on June 1, 3:54 PM CDT",
            "weather": "Partly Cloudy",
            "temperature_string": "72.0 F (22.2 C)",
            "temp_f": 72.0,
            "temp_c": 22.2,
            "relative_humidity": "45%",
            "wind_string": "From the SSE at 12.0 MPH Gusting to 20.0 MPH",
            "wind_mph": 12.0,
            "pressure_mb": "1013",
            "pressure_in": "29.92",
            "pressure_trend": "+",
            "dewpoint_string": "50 F (10 C)",
            "heat_index_string": "NA",
            "windchill_string": "NA",
            "visibility_mi": "10.0",
            "UV": "5",
            "precip_today_string": "0.00 in (0 mm)",
        },
        "forecast": {
            "txt_forecast": {
                "date": "3:00 PM CDT",
                "forecastday": [
                    {"period": 0, "title": "Saturday", "fcttext": "Sunny. High 82F."},
                    {"period": 1, "title": "Saturday Night", "fcttext": "Clear. Low 60F."},
                ],
            },
            "simpleforecast": {
                "forecastday": [
                    {
                        "date": {"day": 1, "monthname": "June", "weekday": "Saturday"},
                        "high": {"fahrenheit": "82", "celsius": "28"},
                        "low": {"fahrenheit": "60", "celsius": "16"},
                        "conditions": "Clear",
                        "pop": 10,
                    },
                ],
            },
        },
        "moon_phase": {
            "percentIlluminated": "81",
            "ageOfMoon": "10",
            "phaseofMoon": "Waxing Gibbous",
            "current_time": {"hour": "15", "minute": "54"},
            "sunrise": {"hour": "6", "minute": "01"},
            "sunset": {"hour": "20", "minute": "52"},
        },
        "history": {
            "date": {"pretty": "January 1, 2013"},
            "observations": [{"date": {"pretty": "12:54 AM CST on January 01, 2013"}, "tempi": "18.0"}],
            "dailysummary": [
                {
                    "meantempi": "22", "meantempm": "-6",
                    "maxtempi": "30", "maxtempm": "-1",
                    "mintempi": "14", "mintempm": "-10",
                    "precipi": "0.00", "precipm": "0.0",
                    "humidity": "71",
                    "meanwindspdi": "8", "meanwdire": "NNW",
                    "maxwspdi": "17",
                    "snow": "1", "rain": "0", "fog": "0", "thunder": "0",
                },
            ],
        },
    }


@pytest.fixture
def sample_body(sample_payload) -> bytes:
    return json.dumps(sample_payload).encode()


@pytest.fixture
def sample_obs(sample_payload) -> CompositeObservation:
    return CompositeObservation.model_validate(sample_payload)
