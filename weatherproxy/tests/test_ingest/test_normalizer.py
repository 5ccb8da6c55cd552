"""Tests for CWA payload normalization."""

import copy

import pytest

from weatherproxy.ingest.normalizer import normalize_response


def _element(name: str, values: list[str]) -> dict:
    return {
        "elementName": name,
        "time": [
            {
                "startTime": f"2026-10-2{i} 06:00:00",
                "endTime": f"2026-10-2{i} 18:00:00",
                "parameter": {"parameterName": v},
            }
            for i, v in enumerate(values)
        ],
    }


def _payload(*elements: dict, city: str = "澎湖縣") -> dict:
    return {
        "records": {
            "datasetDescription": "test dataset",
            "location": [{"locationName": city, "weatherElement": list(elements)}],
        }
    }


class TestNormalizeResponse:
    def test_short_term_fixture(self, short_term_payload: dict):
        snapshot = normalize_response(short_term_payload)
        assert snapshot is not None
        assert snapshot.city == "金門縣"
        assert snapshot.update_time == "三十六小時天氣預報"
        assert len(snapshot.forecasts) == 3

        first = snapshot.forecasts[0]
        assert first.start_time == "2026-10-19 18:00:00"
        assert first.end_time == "2026-10-20 06:00:00"
        assert first.weather == "多雲時晴"
        assert first.rain == "10%"
        assert first.min_temp == "22°C"
        assert first.max_temp == "25°C"
        assert first.comfort == "舒適"
        assert first.wind_speed == ""

    def test_weekly_fixture_only_temperatures(self, weekly_payload: dict):
        snapshot = normalize_response(weekly_payload)
        assert snapshot is not None
        assert len(snapshot.forecasts) == 3
        last = snapshot.forecasts[-1]
        assert last.min_temp == "21°C"
        assert last.max_temp == "26°C"
        assert last.weather == ""
        assert last.rain == ""
        assert last.comfort == ""

    def test_slot_count_follows_first_element(self):
        snapshot = normalize_response(
            _payload(_element("Wx", ["晴", "陰", "雨", "晴"]), _element("WS", ["1", "2", "3", "4"]))
        )
        assert snapshot is not None
        assert len(snapshot.forecasts) == 4
        assert [p.wind_speed for p in snapshot.forecasts] == ["1", "2", "3", "4"]

    def test_unknown_elements_ignored(self):
        snapshot = normalize_response(
            _payload(_element("PoP", ["30"]), _element("RH", ["80"]))
        )
        assert snapshot is not None
        period = snapshot.forecasts[0]
        assert period.rain == "30%"
        assert period.to_dict() == {
            "startTime": "2026-10-20 06:00:00",
            "endTime": "2026-10-20 18:00:00",
            "weather": "",
            "rain": "30%",
            "minTemp": "",
            "maxTemp": "",
            "comfort": "",
            "windSpeed": "",
        }

    def test_positional_alignment_not_resorted(self):
        # Second element lists its slots in reverse; values are still taken by index.
        pop = _element("PoP", ["10", "90"])
        pop["time"].reverse()
        snapshot = normalize_response(_payload(_element("Wx", ["晴", "雨"]), pop))
        assert snapshot is not None
        assert [p.rain for p in snapshot.forecasts] == ["90%", "10%"]
        assert snapshot.forecasts[0].start_time == "2026-10-20 06:00:00"

    def test_preserves_upstream_order(self, short_term_payload: dict):
        snapshot = normalize_response(short_term_payload)
        assert snapshot is not None
        starts = [p.start_time for p in snapshot.forecasts]
        assert starts == [
            "2026-10-19 18:00:00",
            "2026-10-20 06:00:00",
            "2026-10-20 18:00:00",
        ]

    def test_missing_city_and_description(self):
        payload = _payload(_element("Wx", ["晴"]))
        del payload["records"]["datasetDescription"]
        del payload["records"]["location"][0]["locationName"]
        snapshot = normalize_response(payload)
        assert snapshot is not None
        assert snapshot.city == ""
        assert snapshot.update_time == ""


class TestNormalizeReturnsNone:
    @pytest.mark.parametrize("raw", [None, [], "not json", {}, {"records": None}])
    def test_not_a_payload(self, raw):
        assert normalize_response(raw) is None

    def test_empty_records(self):
        assert normalize_response({"records": {}}) is None

    def test_empty_location_list(self):
        assert normalize_response({"records": {"location": []}}) is None

    def test_empty_first_location(self):
        assert normalize_response({"records": {"location": [{}]}}) is None

    def test_first_location_not_an_object(self):
        assert normalize_response({"records": {"location": ["x"]}}) is None

    def test_first_element_not_an_object(self):
        payload = {"records": {"location": [{"weatherElement": ["x"]}]}}
        assert normalize_response(payload) is None

    def test_empty_weather_elements(self):
        assert normalize_response(_payload()) is None

    def test_first_element_without_time_series(self, short_term_payload: dict):
        payload = copy.deepcopy(short_term_payload)
        del payload["records"]["location"][0]["weatherElement"][0]["time"]
        assert normalize_response(payload) is None

    def test_weekly_locations_shape_has_no_usable_data(self):
        # The live F-D0047-089 schema nests data under records.Locations.
        payload = {"records": {"Locations": [{"Location": [{"LocationName": "金門縣"}]}]}}
        assert normalize_response(payload) is None
