"""
skyterm command line.

    skyterm snapshot [--lat --lon --time --alt --az --fov --mag ...]
    skyterm riseset NAME [--time ...]
    skyterm window

Observer and display defaults come from the config file (see
``skyterm.config``); command-line flags override them for one run.
"""

from __future__ import annotations
import argparse
import logging
import os
import sys
from datetime import datetime, timezone
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import Config, load_config
from .core.astro_time import parse_iso
from .core.projection import ViewProjection
from .core.types import MAX_FOV_DEG, MIN_FOV_DEG, Observer, ViewState
from .errors import SkytermError
from .hud import event_rows, info_rows, status_line
from .rendering.braille import BrailleCanvas, render_stars_braille
from .rendering.canvas import Canvas
from .rendering.pipeline import RenderOptions, RenderPipeline
from .sky_model import SkyModel
from .universe.bodies import Planet

log = logging.getLogger(__name__)

ENV_LOG_LEVEL = "SKYTERM_LOG_LEVEL"
EXIT_ERROR = 2


def _configure_logging(verbose: int = 0) -> None:
    """stderr logging; level from -v/-vv or SKYTERM_LOG_LEVEL."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG
    env_level = os.environ.get(ENV_LOG_LEVEL, "").upper()
    if env_level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


def parse_instant(text: str) -> datetime:
    """argparse type for --time."""
    try:
        return parse_iso(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO 8601 time: {text!r}") from None


# ---------------------------------------------------------------------------
# Shared setup
# ---------------------------------------------------------------------------

def _resolve(args: argparse.Namespace) -> tuple[Config, Observer, datetime]:
    cfg = load_config(args.config)
    obs = cfg.observer()
    if args.lat is not None or args.lon is not None:
        obs = Observer(
            latitude=args.lat if args.lat is not None else obs.latitude,
            longitude=args.lon if args.lon is not None else obs.longitude,
            elevation_m=obs.elevation_m,
            name="" if args.lat is not None and args.lon is not None else obs.name,
        )
    instant = args.time if args.time is not None else datetime.now(timezone.utc)
    return cfg, obs, instant


def _pick(flag: Optional[bool], default: bool) -> bool:
    return default if flag is None else flag


def build_options(cfg: Config, args: argparse.Namespace) -> RenderOptions:
    d = cfg.display
    return RenderOptions(
        magnitude_limit=args.mag if args.mag is not None else d.magnitude_limit,
        show_grid=_pick(args.grid, d.show_coordinate_grid),
        show_constellation_lines=_pick(args.lines, d.show_constellation_lines),
        show_constellation_labels=_pick(args.names, d.show_constellation_names),
        show_star_labels=_pick(args.star_names, d.show_star_labels),
        show_deep_sky=_pick(args.deep_sky, d.show_deep_sky),
        show_planets=not args.no_planets,
        show_planet_labels=_pick(args.planet_names, d.show_planet_labels),
        color_by_spectral_type=d.color_stars_by_type,
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_snapshot(args: argparse.Namespace, console: Console) -> int:
    cfg, obs, instant = _resolve(args)
    options = build_options(cfg, args)

    fov = max(MIN_FOV_DEG, min(MAX_FOV_DEG, args.fov))
    view = ViewState(center_alt=args.alt, center_az=args.az % 360.0, fov=fov)
    width = args.width or console.size.width
    height = args.height or max(console.size.height - 2, 1)

    model = SkyModel(obs)
    model.update(instant)

    if args.braille or cfg.display.use_braille_rendering:
        bc = BrailleCanvas(width, height)
        render_stars_braille(bc, model.stars, ViewProjection(view, width, height),
                             options.magnitude_limit)
        console.print(bc.to_text(), soft_wrap=True)
    else:
        canvas = Canvas(width, height)
        RenderPipeline().render(canvas, model.scene(), view, options)
        console.print(canvas.to_text(), soft_wrap=True)

    console.print(status_line(obs, view, options, instant))
    return 0


def cmd_riseset(args: argparse.Namespace, console: Console) -> int:
    cfg, obs, instant = _resolve(args)
    model = SkyModel(obs)
    model.update(instant)

    body = model.find(args.name)
    tz = cfg.display_tz()
    rows = info_rows(body, obs, instant, tz)
    if isinstance(body, Planet):
        # Asked for explicitly, so show the day's estimate anyway.
        rows += event_rows(body, obs, instant, tz)

    table = Table(title=f"{body.name} ({SkyModel.describe_kind(body)})",
                  show_header=False)
    table.add_column(style="green")
    table.add_column()
    for label, value in rows:
        table.add_row(label, value)
    console.print(table)
    return 0


def cmd_window(args: argparse.Namespace, console: Console) -> int:
    # pygame is only needed for this command
    from .viewer import run_viewer

    cfg, obs, _ = _resolve(args)
    return run_viewer(cfg, obs, start=args.time, width=args.width, height=args.height)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", type=str, default=None,
                   help="config file (default: $SKYTERM_CONFIG or XDG path)")
    p.add_argument("--lat", type=float, default=None, help="observer latitude, degrees N")
    p.add_argument("--lon", type=float, default=None, help="observer longitude, degrees E")
    p.add_argument("--time", type=parse_instant, default=None,
                   help="ISO 8601 instant (default: now)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skyterm",
        description="Terminal planetarium: stars, planets and deep-sky objects.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="more logging (-vv for debug)")
    sub = parser.add_subparsers(dest="command", required=True)

    snap = sub.add_parser("snapshot", help="print one frame of the sky")
    _add_common(snap)
    snap.add_argument("--alt", type=float, default=45.0, help="view centre altitude")
    snap.add_argument("--az", type=float, default=180.0, help="view centre azimuth")
    snap.add_argument("--fov", type=float, default=60.0, help="field of view, degrees")
    snap.add_argument("--mag", type=float, default=None, help="limiting magnitude")
    snap.add_argument("--width", type=int, default=0, help="columns (default: terminal)")
    snap.add_argument("--height", type=int, default=0, help="rows (default: terminal)")
    snap.add_argument("--grid", action=argparse.BooleanOptionalAction, default=None)
    snap.add_argument("--lines", action=argparse.BooleanOptionalAction, default=None,
                      help="constellation lines")
    snap.add_argument("--names", action=argparse.BooleanOptionalAction, default=None,
                      help="constellation names")
    snap.add_argument("--star-names", action=argparse.BooleanOptionalAction, default=None)
    snap.add_argument("--planet-names", action=argparse.BooleanOptionalAction, default=None)
    snap.add_argument("--deep-sky", action=argparse.BooleanOptionalAction, default=None)
    snap.add_argument("--no-planets", action="store_true")
    snap.add_argument("--braille", action="store_true", help="high-resolution star field")
    snap.set_defaults(func=cmd_snapshot)

    rs = sub.add_parser("riseset", help="rise, transit and set times for an object")
    rs.add_argument("name", help="star, planet or Messier object")
    _add_common(rs)
    rs.set_defaults(func=cmd_riseset)

    win = sub.add_parser("window", help="interactive chart in a pygame window")
    _add_common(win)
    win.add_argument("--width", type=int, default=0)
    win.add_argument("--height", type=int, default=0)
    win.set_defaults(func=cmd_window)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    console = Console(highlight=False)
    try:
        return args.func(args, console)
    except SkytermError as exc:
        log.debug("command failed", exc_info=True)
        Console(stderr=True).print(Text.assemble(("skyterm: ", "red"), str(exc)))
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
