"""CLI entry point for the weather station."""

import argparse
import logging
import shlex
import sys

from pydantic import ValidationError

from station.app import WeatherStation
from station.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from station.config.schema import StationConfig
from station.models.storage import LoadStatus
from station.reporting.formatters import format_reading_json, format_reading_text
from station.storage.gateway import PersistenceGateway
from station.weather.record import WeatherRecord
from station.weather.units import convert, parse_scale

DEFAULT_CONFIG = "config/station.yaml"

SHELL_HELP = """Commands:
  collect [API|Sensor]   collect a reading and notify observers
  threshold VALUE        warn when temperature drops below VALUE (current scale)
  scale NAME             Celsius, Fahrenheit or Kelvin
  source NAME            API or Sensor
  show                   display weather data
  condition              display weather condition
  save [TIME]            store the current reading
  load TIME              show a stored reading
  undo                   restore the reading before the last collect
  quit"""


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="station",
        description="Weather monitoring and alert station",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=None, help="SQLite DB path")

    sub = parser.add_subparsers(dest="command")

    # collect
    collect_p = sub.add_parser("collect", help="Collect one reading")
    collect_p.add_argument("--source", help="API or Sensor")
    collect_p.add_argument("--scale", help="Display scale")
    collect_p.add_argument(
        "--threshold", type=float, action="append", default=[],
        help="Alert threshold in the display scale (repeatable)",
    )
    collect_p.add_argument("--json", action="store_true", help="Print JSON")

    # load / history
    load_p = sub.add_parser("load", help="Show a stored reading")
    load_p.add_argument("time", help="Time key, e.g. '2023-11-07 12:00:00'")
    load_p.add_argument("--scale", help="Display scale")
    history_p = sub.add_parser("history", help="List stored time keys")
    history_p.add_argument("--limit", type=int, default=20)

    # convert
    convert_p = sub.add_parser("convert", help="Convert a temperature")
    convert_p.add_argument("value", type=float)
    convert_p.add_argument("from_scale")
    convert_p.add_argument("to_scale")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    # shell
    sub.add_parser("shell", help="Interactive session")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except ValidationError as e:
        print(f"Error: {e}")
        return 1
    if args.db:
        config = config.model_copy(
            update={"storage": config.storage.model_copy(update={"db_path": args.db})}
        )

    if args.command == "collect":
        return _cmd_collect(config, args)
    elif args.command == "load":
        return _cmd_load(config, args)
    elif args.command == "history":
        return _cmd_history(config, args)
    elif args.command == "convert":
        return _cmd_convert(args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "shell":
        return run_shell(_build_station(config))
    else:
        parser.print_help()
        return 1


def _print_alert(message: str) -> None:
    print(f"ALERT: {message}")


def _build_station(config: StationConfig) -> WeatherStation:
    record = WeatherRecord(alert_sink=_print_alert)
    gateway = PersistenceGateway(config.storage.db_path)
    return WeatherStation(config, record, gateway)


def _cmd_collect(config: StationConfig, args) -> int:
    station = _build_station(config)
    if args.scale:
        station.set_scale(args.scale)
    for threshold in args.threshold:
        station.add_threshold(threshold)
    reading = station.collect(args.source)
    if args.json:
        condition = station.record.current_condition()
        print(format_reading_json(reading, condition, station.scale))
    else:
        print(station.display())
        print(station.display_condition())
    return 0


def _cmd_load(config: StationConfig, args) -> int:
    gateway = PersistenceGateway(config.storage.db_path)
    result = gateway.load(args.time)
    if result.status == LoadStatus.NOT_FOUND:
        print(f"No reading stored at {args.time}")
        return 1
    if result.status == LoadStatus.ERROR:
        print(f"Error: {result.error_message}")
        return 1
    print(format_reading_text(result.reading, args.scale or config.display.scale))
    return 0


def _cmd_history(config: StationConfig, args) -> int:
    gateway = PersistenceGateway(config.storage.db_path)
    times = gateway.history(args.limit)
    if not times:
        print("No stored readings")
    for t in times:
        print(t)
    return 0


def _cmd_convert(args) -> int:
    src = parse_scale(args.from_scale)
    dst = parse_scale(args.to_scale)
    value = convert(args.value, src, dst)
    print(f"{args.value:.2f}{src.label} = {value:.2f}{dst.label}")
    return 0


def _cmd_config(config: StationConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        key = key.strip()
        try:
            # edit the file contents, not the env or --db overrides
            base = load_config(args.config, apply_env=False)
            new_config = set_config_value(base, key, value.strip())
            save_config(new_config, args.config)
        except (KeyError, ValueError, OSError) as e:
            print(f"Error: {e}")
            return 1
        print(f"Set {key} = {get_config_value(new_config, key)} in {args.config}")
        return 0
    else:
        print("Use: config show | config set key=value")
        return 1


def run_shell(station: WeatherStation, stdin=None) -> int:
    """Read commands line by line until quit or end of input."""
    stdin = stdin or sys.stdin
    print(SHELL_HELP)
    for line in stdin:
        try:
            parts = shlex.split(line)
        except ValueError as e:
            print(f"Error: {e}")
            continue
        if not parts:
            continue
        command, rest = parts[0].lower(), parts[1:]
        if command in ("quit", "exit"):
            break
        _shell_dispatch(station, command, rest)
    return 0


def _shell_dispatch(station: WeatherStation, command: str, rest: list[str]) -> None:
    if command == "collect":
        station.collect(rest[0] if rest else None)
        print(station.display())
    elif command == "threshold":
        if not rest:
            print("Usage: threshold VALUE")
            return
        try:
            value = float(rest[0])
        except ValueError:
            print(f"Error: not a number: {rest[0]}")
            return
        observer = station.add_threshold(value)
        print(f"Watching for temperatures below {observer.threshold_c:.2f}°C")
    elif command == "scale" and rest:
        print(f"Scale: {station.set_scale(rest[0])}")
    elif command == "source" and rest:
        print(f"Source: {station.set_source(rest[0])}")
    elif command == "show":
        print(station.display())
    elif command == "condition":
        print(station.display_condition())
    elif command == "save":
        result = station.save(" ".join(rest) or None)
        if result.ok:
            print(f"Saved at {result.time}")
        else:
            print(f"Error: {result.error_message}")
    elif command == "load" and rest:
        result = station.load(" ".join(rest))
        if result.found:
            print(format_reading_text(result.reading, station.scale))
        elif result.status == LoadStatus.NOT_FOUND:
            print(f"No reading stored at {result.time}")
        else:
            print(f"Error: {result.error_message}")
    elif command == "undo":
        print("Restored previous reading" if station.undo() else "Nothing to undo")
    else:
        print(SHELL_HELP)


if __name__ == "__main__":
    sys.exit(main())
