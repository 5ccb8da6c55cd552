"""Normalized forecast models shared by the pipeline and the HTTP layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastPeriod:
    start_time: str
    end_time: str
    weather: str = ""
    rain: str = ""
    min_temp: str = ""
    max_temp: str = ""
    comfort: str = ""
    wind_speed: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "weather": self.weather,
            "rain": self.rain,
            "minTemp": self.min_temp,
            "maxTemp": self.max_temp,
            "comfort": self.comfort,
            "windSpeed": self.wind_speed,
        }


@dataclass(frozen=True)
class WeatherSnapshot:
    city: str
    update_time: str  # dataset description, e.g. "三十六小時天氣預報"
    forecasts: tuple[ForecastPeriod, ...]


@dataclass(frozen=True)
class CombinedResult:
    city: str
    update_time_hours: str | None
    update_time_week: str | None
    hours: tuple[ForecastPeriod, ...] = ()
    week: tuple[ForecastPeriod, ...] = ()

    def to_dict(self) -> dict:
        return {
            "city": self.city,
            "updateTime": {
                "hours": self.update_time_hours,
                "week": self.update_time_week,
            },
            "hours": [p.to_dict() for p in self.hours],
            "week": [p.to_dict() for p in self.week],
        }
