from __future__ import annotations

import argparse
import json
import logging
import sys

from cedula.bo import ci
from cedula.config import get_settings
from cedula.exceptions import ErrorKind, ValidationError

logger = logging.getLogger(__name__)


def run_validate(values: list[str], as_json: bool) -> int:
    results = [(value, ci.validate(value)) for value in values]
    if as_json:
        payload = []
        for value, result in results:
            item: dict[str, object] = {"input": value, "valid": result.is_valid}
            if result.is_valid:
                item["compact"] = result.compact
                item["formatted"] = ci.format(result.compact)
            else:
                item["error"] = result.error_kind.value
            payload.append(item)
        print(json.dumps(payload, ensure_ascii=False))
    else:
        for value, result in results:
            if result.is_valid:
                print(f"{value}\tvalid\t{result.compact}")
            else:
                print(f"{value}\tinvalid\t{result.error_kind.value}")

    invalid = sum(1 for _, result in results if not result.is_valid)
    logger.info("validated=%d invalid=%d", len(results), invalid)
    return 1 if invalid else 0


def run_render(values: list[str], command: str, as_json: bool) -> int:
    render = ci.format if command == "format" else ci.compact
    status = 0
    payload = []
    for value in values:
        try:
            rendered = render(value)
        except ValidationError as exc:
            print(f"{value}: {ErrorKind.of(exc).value}", file=sys.stderr)
            status = 1
            continue
        if as_json:
            payload.append({"input": value, command: rendered})
        else:
            print(rendered)
    if as_json:
        print(json.dumps(payload, ensure_ascii=False))
    return status


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description=f"{ci.name} ({ci.local_name}, {ci.abbreviation}) validator")
    parser.add_argument("command", choices=["validate", "format", "compact"])
    parser.add_argument("values", nargs="+", metavar="VALUE")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=settings.log_level,
    )
    parser.add_argument("--json", action="store_true", help="Print results as a JSON list")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    as_json = args.json or settings.output == "json"

    if args.command == "validate":
        return run_validate(args.values, as_json)
    return run_render(args.values, args.command, as_json)


if __name__ == "__main__":
    sys.exit(main())
