from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from randex import api
from randex.contracts import GeneratorConfig, StringOptions
from randex.core import InvalidArgumentError, StatisticalIntegrityError, config_from_env, default_registry, load_config


def _parse_sets(raw: str) -> StringOptions:
    options = StringOptions(0)
    for name in filter(None, (part.strip() for part in raw.split(","))):
        try:
            options |= StringOptions[name.upper()]
        except KeyError as exc:
            raise InvalidArgumentError("sets", f"unknown character set {name!r}") from exc
    return options


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="randex", description="PCG-backed pseudorandom value generator")
    parser.add_argument("--seed", type=int, default=None, help="positive seed for reproducible output")
    parser.add_argument("--config", type=Path, default=None, help="JSON generator configuration file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging level",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_int = sub.add_parser("int", help="uniform integers in [min, max)")
    p_int.add_argument("--min", type=int, default=0)
    p_int.add_argument("--max", type=int, default=None)
    p_int.add_argument("--count", type=int, default=1)

    p_double = sub.add_parser("double", help="uniform doubles in [0, 1)")
    p_double.add_argument("--count", type=int, default=1)

    p_gauss = sub.add_parser("gaussian", help="standard normal deviates")
    p_gauss.add_argument("--count", type=int, default=1)

    p_bytes = sub.add_parser("bytes", help="random bytes printed as hex")
    p_bytes.add_argument("--length", type=int, default=16)

    p_string = sub.add_parser("string", help="random strings from character sets")
    p_string.add_argument("--length", type=int, default=12)
    p_string.add_argument("--sets", default=None, help="comma separated: lowercase,uppercase,numbers,special")
    p_string.add_argument("--count", type=int, default=1)

    p_shuffle = sub.add_parser("shuffle", help="shuffle the given items")
    p_shuffle.add_argument("items", nargs="*")

    p_audit = sub.add_parser("audit", help="run the statistical acceptance checks")
    p_audit.add_argument("--samples", type=int, default=10_000)
    p_audit.add_argument("--store", type=Path, default=None, help="duckdb file to record the report in")
    p_audit.add_argument("--export", type=Path, default=None, help="directory to export audit history to")
    p_audit.add_argument("--strict", action="store_true", help="exit non-zero when any check fails")
    return parser


def _run_audit(args: argparse.Namespace, config: GeneratorConfig) -> int:
    from randex.devtools import AuditStore, StatisticalAuditService

    service = StatisticalAuditService(samples=args.samples, config=config)
    try:
        report = service.run_strict(seed=args.seed) if args.strict else service.run(seed=args.seed)
    except StatisticalIntegrityError as exc:
        report = exc.report
        print(exc)
        status = 1
    else:
        status = 0

    for check in report.checks:
        mark = "ok" if check.passed else "FAIL"
        print(f"- {check.name}: {mark} (statistic={check.statistic:.4f} threshold={check.threshold:.4f})")

    if args.store is not None:
        store = AuditStore(args.store)
        store.record(report)
        if args.export is not None:
            for path in store.export(args.export):
                print(f"- {path}")
    return status


def _draw(args: argparse.Namespace) -> None:
    if args.command == "int":
        for _ in range(args.count):
            print(api.next_int(args.min, args.max))
    elif args.command == "double":
        for _ in range(args.count):
            print(repr(api.next_double()))
    elif args.command == "gaussian":
        for _ in range(args.count):
            print(repr(api.next_gaussian()))
    elif args.command == "bytes":
        print(api.next_bytes(args.length).hex())
    elif args.command == "string":
        options = _parse_sets(args.sets) if args.sets is not None else None
        for _ in range(args.count):
            print(api.next_string(args.length, options))
    elif args.command == "shuffle":
        items = list(args.items)
        api.shuffle(items)
        print(" ".join(items))


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "audit" and args.export is not None and args.store is None:
        parser.error("audit --export requires --store")
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config) if args.config is not None else config_from_env()
        if args.command == "audit":
            return _run_audit(args, config)

        registry = default_registry()
        registry.configure(config)
        registry.discard()
        if args.seed is not None:
            api.set_seed(args.seed)
        _draw(args)
    except InvalidArgumentError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
