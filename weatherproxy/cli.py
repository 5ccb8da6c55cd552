"""CLI entry point for the weather proxy."""

import argparse
import asyncio
import json
import logging

from dotenv import load_dotenv
from pydantic import ValidationError

from weatherproxy.config.defaults import REGION_ALIASES
from weatherproxy.config.loader import load_config, masked_config_json
from weatherproxy.models.errors import WeatherProxyError
from weatherproxy.pipeline.aggregator import WeatherAggregator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "weatherproxy.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherproxy",
        description="CWA forecast proxy merging 36-hour and weekly data",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Optional config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP server")
    serve_p.add_argument("--host", help="Bind address (overrides config)")
    serve_p.add_argument("--port", type=int, help="Port (overrides config/PORT)")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Fetch combined forecast once")
    fetch_p.add_argument("location", help="Region alias or county/city name")

    # regions
    sub.add_parser("regions", help="List supported region aliases")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "regions":
        return _cmd_regions()

    load_dotenv()
    try:
        config = load_config(args.config)
    except ValidationError as e:
        print(f"Invalid configuration: {e}")
        return 1

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from weatherproxy.server import create_app

    update = {}
    if args.host:
        update["host"] = args.host
    if args.port:
        update["port"] = args.port
    if update:
        config = config.model_copy(update=update)

    if config.api_key_value() is None:
        logger.warning("CWA_API_KEY is not set; weather requests will fail")
    logger.info("Server listening on %s:%d", config.host, config.port)
    logger.info("Environment: %s", config.environment)
    uvicorn.run(create_app(config), host=config.host, port=config.port)
    return 0


def _cmd_fetch(config, args) -> int:
    aggregator = WeatherAggregator(config)
    try:
        result = asyncio.run(aggregator.combine(args.location))
    except WeatherProxyError as e:
        print(json.dumps(e.to_dict(), ensure_ascii=False, indent=2))
        return 1
    except Exception as e:
        logger.exception("Failed to fetch weather data for %r", args.location)
        print(json.dumps(
            {"error": "Server error", "message": str(e)},
            ensure_ascii=False,
            indent=2,
        ))
        return 1
    print(json.dumps(
        {"success": True, "data": result.to_dict()},
        ensure_ascii=False,
        indent=2,
    ))
    return 0


def _cmd_regions() -> int:
    for alias, name in REGION_ALIASES.items():
        print(f"{alias:<12} {name}")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(masked_config_json(config))
        return 0
    print("Use: config show")
    return 1
