from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


def run_check(value: str, *, rule_ids: list[str] | None, day: str, reporter: str) -> list[str]:
    _ensure_backend_on_path()

    from common.verification_engine.factory import VerifierFactory
    from common.verification_engine.probes import get_time_probe
    from common.verification_engine.reporter import get_reporter

    factory = VerifierFactory(get_time_probe(day))
    verifier = factory.create_from_registry(rule_ids or None, reporter=get_reporter(reporter))
    return verifier.verify(value)


def run_liveness(*, url: str | None, marker: str | None, timeout: float | None) -> list[str]:
    _ensure_backend_on_path()

    from common.verification_engine.config import LivenessConfig
    from common.verification_engine.liveness import LivenessCheck
    from connectors.http.client import UrllibFetcher
    from connectors.http.config import get_http_config

    http_config = get_http_config()
    overrides = {
        key: value
        for key, value in (("url", url), ("marker", marker), ("timeout_seconds", timeout))
        if value is not None
    }
    config = LivenessConfig.model_validate({**http_config.liveness_config().model_dump(), **overrides})
    fetcher = UrllibFetcher(timeout_seconds=config.timeout_seconds, user_agent=http_config.user_agent)
    return asyncio.run(LivenessCheck(fetcher, config).run())


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run registered rules or a liveness check and print failures.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level for engine diagnostics (default: WARNING).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Verify a value against registered rules.")
    check.add_argument("value", help="Value to verify.")
    check.add_argument(
        "--rule",
        action="append",
        dest="rule_ids",
        default=None,
        help="Rule id to run (repeatable; defaults to every registered rule).",
    )
    check.add_argument(
        "--day",
        default="system",
        help="Time probe: 'system' for the local clock or a weekday (e.g. MON) to pin it.",
    )
    check.add_argument(
        "--reporter",
        choices=("console", "logging", "memory"),
        default="console",
        help="Where the PASSED/FAILED verdict goes (default: console).",
    )

    liveness = sub.add_parser("liveness", help="Fetch a page and check it carries the expected marker.")
    liveness.add_argument("--url", default=None, help="Page to fetch (default: LIVENESS_URL or http://example.com).")
    liveness.add_argument("--marker", default=None, help="Text the page must contain.")
    liveness.add_argument("--timeout", type=float, default=None, help="Fetch timeout in seconds.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "check":
            failures = run_check(args.value, rule_ids=args.rule_ids, day=args.day, reporter=args.reporter)
        else:
            failures = run_liveness(url=args.url, marker=args.marker, timeout=args.timeout)
    except (KeyError, ValueError) as exc:
        raise SystemExit(f"error: {exc}") from exc

    for reason in failures:
        print(f"- {reason}")
    if not failures:
        print("OK")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
