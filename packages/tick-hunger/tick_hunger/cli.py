"""tick-hunger command line: inspect and edit a saved hunger record.

Commands:
  status              Reconcile against the store and print the current state
  add SECONDS         Restore sustenance (eat) and save
  set SECONDS         Override the level and save
  reset               Refill to max_level and save
  simulate SECONDS    Run the step loop on a scratch copy and print events
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from tick_hunger.clock import ManualClock, SystemClock
from tick_hunger.config import HungerConfig, load_config
from tick_hunger.engine import HungerSystem
from tick_hunger.logs import configure_logging
from tick_hunger.store import JsonFileStore, MemoryStore, PersistenceStore, default_store_path
from tick_hunger.types import (
    SEVERITY_CHANGED,
    STARVATION_TICK,
    ConfigurationError,
    InvalidArgument,
    PersistenceReadError,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tick-hunger", description="Inspect and edit a tick-hunger save"
    )
    p.add_argument("--config", type=str, default=None, metavar="FILE",
                   help="YAML config file (default: built-in defaults)")
    p.add_argument("--store", type=str, default=None, metavar="FILE",
                   help=f"JSON save file (default: {default_store_path()})")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = p.add_subparsers(dest="command", required=True)
    sub.add_parser("status", help="Print level, severity and multipliers")
    add = sub.add_parser("add", help="Add SECONDS of sustenance")
    add.add_argument("seconds", type=float)
    set_ = sub.add_parser("set", help="Set the level to SECONDS")
    set_.add_argument("seconds", type=float)
    sub.add_parser("reset", help="Refill to max_level")
    sim = sub.add_parser("simulate", help="Run SECONDS of decay without saving")
    sim.add_argument("seconds", type=float)
    sim.add_argument("--dt", type=float, default=1.0,
                     help="Step size in seconds (default: 1.0)")
    return p


def _print_status(system: HungerSystem) -> None:
    print(f"level:      {system.get_level():.2f} / {system.config.max_level:g}")
    print(f"fill:       {system.get_fill_fraction():.3f}")
    print(f"severity:   {system.get_severity_label()}")
    print(f"movement:   x{system.movement_multiplier():.3f}")
    print(f"difficulty: x{system.difficulty_multiplier():.3f}")


def _scratch_copy(store: PersistenceStore, config: HungerConfig) -> MemoryStore:
    data: dict[str, str] = {}
    try:
        for key in (config.level_key, config.timestamp_key):
            if store.has(key):
                value = store.get(key)
                if value is not None:
                    data[key] = value
    except PersistenceReadError as exc:
        logger.warning("Store unreadable, simulating from a fresh record: %s", exc)
        data = {}
    return MemoryStore(data)


def _simulate(system: HungerSystem, clock: ManualClock, seconds: float, dt: float) -> None:
    elapsed = 0.0

    def on_severity(signal: str, data: dict[str, Any]) -> None:
        print(f"t={elapsed:8.2f}s  severity -> {data['severity'].label}")

    def on_tick(signal: str, data: dict[str, Any]) -> None:
        print(f"t={elapsed:8.2f}s  starvation tick")

    system.bus.subscribe(SEVERITY_CHANGED, on_severity)
    system.bus.subscribe(STARVATION_TICK, on_tick)
    system.start()
    while elapsed < seconds:
        step = min(dt, seconds - elapsed)
        clock.advance(step)
        elapsed += step
        system.step(step)
    print(f"after {seconds:g}s:")
    _print_status(system)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    if args.command == "simulate" and (args.dt <= 0 or args.seconds < 0):
        print("error: simulate needs SECONDS >= 0 and --dt > 0", file=sys.stderr)
        return 2

    store = JsonFileStore(args.store if args.store else default_store_path())

    if args.command == "simulate":
        clock = ManualClock(SystemClock().now())
        system = HungerSystem(config, _scratch_copy(store, config), clock)
        _simulate(system, clock, args.seconds, args.dt)
        return 0

    system = HungerSystem(config, store)
    result = system.start()
    if args.command == "status":
        print(f"record:     {result.case.value}")
    elif args.command == "add":
        system.add_time(args.seconds)
    elif args.command == "set":
        try:
            system.set_level(args.seconds)
        except InvalidArgument as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
    elif args.command == "reset":
        system.reset_to_full()
    _print_status(system)
    system.shutdown()
    return 0
