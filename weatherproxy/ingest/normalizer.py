"""Normalize CWA datastore payloads into WeatherSnapshot records."""

from typing import Any

from weatherproxy.models.forecast import ForecastPeriod, WeatherSnapshot

# CWA element code -> (ForecastPeriod field, unit suffix)
ELEMENT_FIELDS: dict[str, tuple[str, str]] = {
    "Wx": ("weather", ""),
    "PoP": ("rain", "%"),
    "MinT": ("min_temp", "°C"),
    "MaxT": ("max_temp", "°C"),
    "CI": ("comfort", ""),
    "WS": ("wind_speed", ""),
}


def normalize_response(raw: Any) -> WeatherSnapshot | None:
    """Flatten the per-element time series of the first location.

    Returns None when the payload lacks records, a location, or a first
    weather element with a time series. Slots are aligned by position: time[i]
    of every element is taken to describe the same period as time[i] of the
    first element. Nothing is re-sorted or matched by timestamp.
    """
    if not isinstance(raw, dict):
        return None
    records = raw.get("records")
    if not isinstance(records, dict):
        return None
    locations = records.get("location")
    if not isinstance(locations, list) or not locations:
        return None

    location = locations[0]
    if not isinstance(location, dict) or not location:
        return None

    elements = location.get("weatherElement")
    if (
        not isinstance(elements, list)
        or not elements
        or not isinstance(elements[0], dict)
        or not isinstance(elements[0].get("time"), list)
    ):
        return None

    slots = elements[0]["time"]
    forecasts = []
    for i, slot in enumerate(slots):
        fields: dict[str, str] = {}
        for element in elements:
            mapping = ELEMENT_FIELDS.get(element.get("elementName"))
            if mapping is None:
                continue
            field_name, suffix = mapping
            value = element["time"][i]["parameter"]["parameterName"]
            fields[field_name] = f"{value}{suffix}"
        forecasts.append(
            ForecastPeriod(
                start_time=slot.get("startTime", ""),
                end_time=slot.get("endTime", ""),
                **fields,
            )
        )

    return WeatherSnapshot(
        city=location.get("locationName", ""),
        update_time=records.get("datasetDescription", ""),
        forecasts=tuple(forecasts),
    )
