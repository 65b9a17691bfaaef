"""Describe what a default verifier would check, in run order.

The catalog lists the verifier settings (blocked days, blocked reason, verdict
messages) followed by each registered rule with the reason it reports on
failure, so the reasons a caller may see can be reviewed without running it.
"""

from __future__ import annotations

import argparse
import json
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .config import VerifierConfig
from .registry import RuleRegistry, registry

# Ensure built-in rules are imported/registered when generating a catalog.
from . import rules as _builtin_rules  # noqa: F401


class RuleCatalogEntry(BaseModel):
    position: int
    rule_id: str
    kind: Literal["class", "function"]
    rule_title: str = ""
    failure_reason: str = ""


class VerifierCatalog(BaseModel):
    verifier: VerifierConfig = Field(default_factory=VerifierConfig)
    rules: List[RuleCatalogEntry] = Field(default_factory=list)


def build_catalog(
    source: Optional[RuleRegistry] = None,
    *,
    config: Optional[VerifierConfig] = None,
) -> VerifierCatalog:
    source = registry if source is None else source
    entries: List[RuleCatalogEntry] = []
    for position, rule in enumerate(source.create(), start=1):
        entries.append(
            RuleCatalogEntry(
                position=position,
                rule_id=rule.rule_id,
                kind="class" if isinstance(source.source(rule.rule_id), type) else "function",
                rule_title=rule.rule_title,
                failure_reason=rule.failure_reason,
            )
        )
    return VerifierCatalog(verifier=config or VerifierConfig(), rules=entries)


def render_catalog(catalog: VerifierCatalog, fmt: str = "json") -> str:
    payload = catalog.model_dump(mode="json")
    if fmt == "json":
        return json.dumps(payload, indent=2)
    try:
        import yaml  # type: ignore
    except ModuleNotFoundError as exc:
        raise SystemExit(
            "PyYAML is required for YAML output. Install the `yaml` extra (e.g., `pip install -e .[yaml]`)."
        ) from exc
    return yaml.safe_dump(payload, sort_keys=False)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Describe the default verifier: settings and rules in run order.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="json",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--rule",
        action="append",
        dest="rule_ids",
        default=None,
        help="Only describe these rule ids, in the order given (repeatable).",
    )
    args = parser.parse_args(argv)

    catalog = build_catalog()
    if args.rule_ids:
        by_id = {entry.rule_id: entry for entry in catalog.rules}
        missing = [rule_id for rule_id in args.rule_ids if rule_id not in by_id]
        if missing:
            raise SystemExit(f"error: unknown rule id(s): {', '.join(missing)}")
        catalog.rules = [
            by_id[rule_id].model_copy(update={"position": position})
            for position, rule_id in enumerate(args.rule_ids, start=1)
        ]
    print(render_catalog(catalog, args.format))


if __name__ == "__main__":
    main()
