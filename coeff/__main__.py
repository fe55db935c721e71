from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Iterable
from typing import Any

from coeff.config import ExampleConfig
from coeff.env import EnvContainer
from coeff.examples import add_one, add_one_pure, comonad_example, monad_example, volume_example
from coeff.laws import check_all

logger = logging.getLogger(__name__)


def _config(args: argparse.Namespace) -> ExampleConfig:
    return ExampleConfig.from_env().override(
        seed=getattr(args, "seed", None),
        height=getattr(args, "height", None),
    )


def _emit(args: argparse.Namespace, command: str, payload: dict[str, Any]) -> None:
    if args.format == "json":
        print(json.dumps({"status": "ok", "command": command, "result": payload}))


def handle_monad(args: argparse.Namespace) -> int:
    outcome = monad_example(config=_config(args), quiet=args.format == "json")
    _emit(args, "monad", outcome.to_dict())
    return 0


def handle_comonad(args: argparse.Namespace) -> int:
    outcome = comonad_example(config=_config(args), quiet=args.format == "json")
    _emit(args, "comonad", outcome.to_dict())
    return 0 if outcome.agree else 1


def handle_volume(args: argparse.Namespace) -> int:
    outcome = volume_example(args.radius, config=_config(args), quiet=args.format == "json")
    _emit(args, "volume", outcome.to_dict())
    return 0


def handle_laws(args: argparse.Namespace) -> int:
    config = _config(args)
    container = EnvContainer(value=args.value, env=config.height)
    report = check_all(
        container,
        add_one_pure,
        lambda d: d.extract() * d.env,
        value_f=add_one,
        value_g=lambda x: x * 2.0,
    )
    for name, held in report.results.items():
        logger.debug("law %s: %s", name, "ok" if held else "FAILED")

    if args.format == "json":
        print(json.dumps({"status": "ok" if report.ok else "failed", "command": "laws", "result": report.to_dict()}))
    else:
        for name, held in report.results.items():
            print(f"{name}: {'ok' if held else 'FAILED'}")
    return 0 if report.ok else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coeff",
        description="Run the optional-value and environment-container examples",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    monad_parser = subparsers.add_parser(
        "monad",
        help="Add 586 to a random u16, reporting overflow as Nothing",
    )
    monad_parser.add_argument("--seed", type=int, help="Seed for the random sample (default: $COEFF_SEED)")
    monad_parser.set_defaults(func=handle_monad)

    comonad_parser = subparsers.add_parser(
        "comonad",
        help="Show that map and extend agree on (14.0, height)",
    )
    comonad_parser.add_argument("--height", type=float, help="Environment value (default: $COEFF_HEIGHT or 15.0)")
    comonad_parser.set_defaults(func=handle_comonad)

    volume_parser = subparsers.add_parser(
        "volume",
        help="Cylinder volume with the height taken from the environment",
    )
    volume_parser.add_argument("--radius", type=float, default=14.0, help="Cylinder radius (default: 14.0)")
    volume_parser.add_argument("--height", type=float, help="Environment value (default: $COEFF_HEIGHT or 15.0)")
    volume_parser.set_defaults(func=handle_volume)

    laws_parser = subparsers.add_parser(
        "laws",
        help="Check the functor and comonad laws on one container",
    )
    laws_parser.add_argument("--value", type=float, default=14.0, help="Container value (default: 14.0)")
    laws_parser.add_argument("--height", type=float, help="Environment value (default: $COEFF_HEIGHT or 15.0)")
    laws_parser.set_defaults(func=handle_laws)

    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    try:
        return args.func(args)
    except Exception as exc:
        if args.format == "json":
            print(
                json.dumps(
                    {
                        "status": "error",
                        "error": exc.__class__.__name__,
                        "message": str(exc),
                    }
                )
            )
        else:
            print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
