"""Tests for command-line option resolution."""

import pytest

from wu.config import Config
from wu.errors import EarlyExit, UsageError
from wu.request.features import Feature, FeatureKind
from wu.request.options import normalize_station, resolve_options


class TestNormalizeStation:
    def test_city_state(self):
        assert normalize_station("San Francisco, CA") == "CA/San_Francisco"

    def test_multiword_state(self):
        assert normalize_station("Paris, Ile de France") == "Ile_de_France/Paris"

    def test_airport_code_unchanged(self):
        assert normalize_station("KLNK") == "KLNK"

    def test_zipcode_unchanged(self):
        assert normalize_station("68508") == "68508"

    def test_lat_long_unchanged(self):
        assert normalize_station("40.81,-96.70") == "40.81,-96.70"

    def test_no_space_after_comma_unchanged(self):
        assert normalize_station("Lincoln,NE") == "Lincoln,NE"

    def test_embedded_pair_unchanged(self):
        assert normalize_station("1 Main St, Lincoln, NE") == "1 Main St, Lincoln, NE"

    @pytest.mark.parametrize("station", ["pws:KNELINCO12", "Lincoln NE", ""])
    def test_other_forms_unchanged(self, station):
        assert normalize_station(station) == station


class TestResolveOptions:
    def test_station_from_config(self, config):
        request = resolve_options([], config)
        assert request.station == "KLNK"

    def test_builtin_default_station(self):
        request = resolve_options([], Config(key="abc123"))
        assert request.station == "KLNK"

    def test_station_flag_overrides_config(self):
        request = resolve_options(["-s", "KSFO"], Config(key="abc123", station="KLNK"))
        assert request.station == "KSFO"

    def test_station_flag_normalized(self, config):
        request = resolve_options(["-s", "San Francisco, CA"], config)
        assert request.station == "CA/San_Francisco"

    def test_configured_station_normalized(self):
        request = resolve_options([], Config(key="abc123", station="Lincoln, NE"))
        assert request.station == "NE/Lincoln"

    def test_no_flags_gives_conditions(self, config):
        request = resolve_options([], config)
        assert request.features == (Feature(FeatureKind.CONDITIONS),)

    def test_single_dash_flags(self, config):
        request = resolve_options(["-forecast", "-tides"], config)
        assert [f.token for f in request.features] == ["forecast", "tide"]

    def test_double_dash_flags(self, config):
        request = resolve_options(["--forecast10", "--almanac"], config)
        assert [f.token for f in request.features] == ["almanac", "forecast10day"]

    def test_history_equals_form(self, config):
        request = resolve_options(["-history=20130101"], config)
        assert [f.token for f in request.features] == ["history_20130101"]

    def test_all_flag(self, config):
        request = resolve_options(["-all"], config)
        assert len(request.features) == 11

    def test_history_planner_conflict(self, config):
        with pytest.raises(UsageError) as exc:
            resolve_options(["-history", "20130101", "-planner", "07010731"], config)
        assert exc.value.exit_code == 1

    def test_lookup_takes_station_argument(self, config):
        request = resolve_options(["-lookup", "Lincoln, NE"], config)
        assert request.station == "NE/Lincoln"
        assert request.features == (Feature(FeatureKind.GEOLOOKUP),)

    def test_lookup_without_station(self, config):
        with pytest.raises(UsageError) as exc:
            resolve_options(["-lookup"], config)
        assert exc.value.exit_code == 0
        assert str(exc.value).startswith("Usage: wu -lookup")

    def test_lookup_with_extra_flags(self, config):
        with pytest.raises(UsageError) as exc:
            resolve_options(["-lookup", "-forecast", "68508"], config)
        assert exc.value.exit_code == 0

    def test_lookup_checked_before_help(self, config):
        with pytest.raises(UsageError):
            resolve_options(["-lookup", "-help"], config)

    def test_help(self, config):
        with pytest.raises(EarlyExit) as exc:
            resolve_options(["-help"], config)
        assert exc.value.exit_code == 0
        assert "-conditions" in str(exc.value)

    def test_version(self, config):
        with pytest.raises(EarlyExit) as exc:
            resolve_options(["-version"], config)
        assert exc.value.exit_code == 0
        assert str(exc.value).startswith("wu ")

    def test_stray_argument_rejected(self, config):
        with pytest.raises(SystemExit) as exc:
            resolve_options(["KLNK"], config)
        assert exc.value.code == 2

    def test_debug_flag(self, config):
        assert resolve_options(["-debug"], config).debug is True
        assert resolve_options([], config).debug is False

    def test_debug_is_not_a_feature(self, config):
        request = resolve_options(["-debug"], config)
        assert request.features == (Feature(FeatureKind.CONDITIONS),)

    def test_negative_coordinates_station_flag(self, config):
        request = resolve_options(["-s", "-33.87,151.21"], config)
        assert request.station == "-33.87,151.21"

    def test_negative_coordinates_long_station_flag(self, config):
        request = resolve_options(["-forecast", "--station", "-33.87,151.21"], config)
        assert request.station == "-33.87,151.21"
        assert [f.token for f in request.features] == ["forecast"]

    def test_lookup_negative_coordinates(self, config):
        request = resolve_options(["-lookup", "-33.87,151.21"], config)
        assert request.station == "-33.87,151.21"
        assert request.features == (Feature(FeatureKind.GEOLOOKUP),)
