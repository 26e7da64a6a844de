from __future__ import annotations
from dataclasses import dataclass

# Value types shared by the coordinate engine, the projection and the
# renderer. Angles are degrees, RA is hours.

@dataclass(frozen=True, slots=True)
class Observer:
    latitude: float            # degrees, positive North
    longitude: float           # degrees, positive East
    elevation_m: float = 0.0
    name: str = ""

@dataclass(frozen=True, slots=True)
class EquatorialCoords:
    ra: float                  # hours [0, 24)
    dec: float                 # degrees [-90, 90]

@dataclass(frozen=True, slots=True)
class HorizontalCoords:
    altitude: float            # degrees [-90, 90]
    azimuth: float             # degrees [0, 360), N=0 E=90

@dataclass(frozen=True, slots=True)
class ScreenPoint:
    x: int
    y: int
    visible: bool

    @classmethod
    def hidden(cls) -> "ScreenPoint":
        return cls(0, 0, False)


DEFAULT_OBSERVER = Observer(40.7128, -74.0060, 10.0, "New York City")

MIN_FOV_DEG = 10.0
MAX_FOV_DEG = 120.0


@dataclass(slots=True)
class ViewState:
    """Centre of the chart in horizontal coordinates plus field of view."""
    center_alt: float = 45.0
    center_az: float = 180.0
    fov: float = 60.0

    def pan(self, delta_az: float, delta_alt: float) -> None:
        self.center_az = (self.center_az + delta_az) % 360.0
        self.center_alt = max(-90.0, min(90.0, self.center_alt + delta_alt))

    def zoom_in(self, step: float = 1.2) -> None:
        self.fov = max(MIN_FOV_DEG, self.fov / step)

    def zoom_out(self, step: float = 1.2) -> None:
        self.fov = min(MAX_FOV_DEG, self.fov * step)

    def look_at(self, alt: float, az: float) -> None:
        self.center_alt = max(-90.0, min(90.0, alt))
        self.center_az = az % 360.0

    def reset(self) -> None:
        self.center_alt = 45.0
        self.center_az = 180.0
        self.fov = 60.0
