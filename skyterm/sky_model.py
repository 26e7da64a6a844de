"""
SkyModel — single source of truth for one observer.

Holds the catalogs and the solar-system bodies, recomputes every Alt/Az on
``update(instant)`` (wholesale, no incremental state) and answers the
questions the hosts ask: what is near the centre of the view, what matches
a search string, what is the selected object doing now.
"""

from __future__ import annotations
import logging
from datetime import datetime
from types import MappingProxyType
from typing import List, Optional

from .catalogs.messier import DeepSkyCatalog
from .catalogs.stars import StarCatalog
from .core.projection import ViewProjection
from .core.types import DEFAULT_OBSERVER, Observer, ViewState
from .errors import UnknownObjectError
from .rendering.pipeline import RenderOptions, SkyScene
from .universe.bodies import BodyKind, CelestialBody, DeepSkyObject, Planet, require_all_kinds
from .universe.ephemeris import DEFAULT_EPHEMERIS, EphemerisProvider
from .universe.planets import calculate_planets

log = logging.getLogger(__name__)

# Selection radius around the view centre, in character cells.
SELECT_RADIUS = 15.0

KIND_NAMES = MappingProxyType({
    BodyKind.STAR:     "Star",
    BodyKind.DEEP_SKY: "Deep sky object",
    BodyKind.PLANET:   "Planet",
    BodyKind.SUN:      "Sun",
    BodyKind.MOON:     "Moon",
})
require_all_kinds(KIND_NAMES, "KIND_NAMES")


class SkyModel:

    def __init__(self, observer: Observer = DEFAULT_OBSERVER,
                 ephemeris: EphemerisProvider = DEFAULT_EPHEMERIS):
        self.observer = observer
        self.ephemeris = ephemeris
        self.stars = StarCatalog()
        self.deep_sky = DeepSkyCatalog()
        self.planets: List[Planet] = []
        self.instant: Optional[datetime] = None

        self.selected: Optional[CelestialBody] = None
        self.following = False

    # ── Per-tick update ─────────────────────────────────────────────────────

    def update(self, instant: datetime) -> None:
        self.instant = instant
        self.stars.update_positions(self.observer, instant)
        self.deep_sky.update_positions(self.observer, instant)
        self.planets = calculate_planets(instant, self.observer, self.ephemeris).all_bodies()
        self._refresh_selected()

    def set_observer(self, observer: Observer) -> None:
        self.observer = observer
        if self.instant is not None:
            self.update(self.instant)

    def scene(self) -> SkyScene:
        return SkyScene(stars=self.stars.bodies,
                        deep_sky=self.deep_sky.bodies,
                        planets=self.planets)

    def all_bodies(self) -> List[CelestialBody]:
        return [*self.stars, *self.planets, *self.deep_sky]

    # ── Lookup ──────────────────────────────────────────────────────────────

    def search(self, query: str) -> Optional[CelestialBody]:
        """
        First substring match, case-insensitive: stars, then solar system,
        then deep sky (matched on 'M42 Orion Nebula').
        """
        q = query.strip().lower()
        if not q:
            return None
        for star in self.stars:
            if q in star.name.lower():
                return star
        for body in self.planets:
            if q in body.name.lower():
                return body
        for obj in self.deep_sky:
            if q in f"{obj.name} {obj.common_name}".lower():
                return obj
        return None

    def find(self, name: str) -> CelestialBody:
        """Exact match first, then substring; raises UnknownObjectError."""
        key = name.strip().lower()
        for body in self.planets:
            if body.name.lower() == key:
                return body
        exact = self.stars.get(name) or self.deep_sky.get(name)
        if exact is not None:
            return exact
        found = self.search(name)
        if found is None:
            raise UnknownObjectError(name)
        return found

    # ── Selection ───────────────────────────────────────────────────────────

    def select_nearest(self, view: ViewState, width: int, height: int,
                       options: Optional[RenderOptions] = None) -> Optional[CelestialBody]:
        """Nearest drawable object within SELECT_RADIUS cells of the view centre."""
        options = options or RenderOptions()
        proj = ViewProjection(view, width, height)

        candidates: List[CelestialBody] = [
            s for s in self.stars if s.magnitude <= options.magnitude_limit]
        if options.show_planets:
            candidates.extend(p for p in self.planets if p.known)
        if options.show_deep_sky:
            candidates.extend(o for o in self.deep_sky
                              if o.magnitude <= options.magnitude_limit + 3.0)

        best, best_dist = None, SELECT_RADIUS
        for body in candidates:
            d = proj.distance_from_center(body.altitude, body.azimuth)
            if d < best_dist:
                best, best_dist = body, d
        self.selected = best
        if best is None:
            self.following = False
        return best

    def select(self, body: Optional[CelestialBody]) -> None:
        self.selected = body
        if body is None:
            self.following = False

    def clear_selection(self) -> None:
        self.select(None)

    def toggle_follow(self) -> bool:
        self.following = self.selected is not None and not self.following
        return self.following

    def center_on_selected(self, view: ViewState) -> None:
        if self.selected is not None:
            view.look_at(self.selected.altitude, self.selected.azimuth)

    def apply_follow(self, view: ViewState) -> None:
        if self.following:
            self.center_on_selected(view)

    def _refresh_selected(self) -> None:
        # Planet objects are rebuilt every tick; re-point the selection at
        # the new instance so follow mode tracks the current position.
        sel = self.selected
        if not isinstance(sel, Planet):
            return
        for body in self.planets:
            if body.name == sel.name:
                self.selected = body
                return
        log.debug("selected body %s vanished after update", sel.name)
        self.clear_selection()

    @staticmethod
    def describe_kind(body: CelestialBody) -> str:
        if isinstance(body, DeepSkyObject):
            return body.dso_type.value
        return KIND_NAMES[body.kind]
