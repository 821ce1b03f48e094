"""Validate JSON or YAML documents against a nestcheck schema.

Usage::

    python scripts/validate_documents.py --schema machine_profile config/machines/*.json
    python scripts/validate_documents.py --schema mypkg.schemas:ORDER --strict order.yaml
"""
from __future__ import annotations

import argparse
import importlib
import json
import os
import sys
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Tuple

import yaml

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from nestcheck.schemas import resolve_schema  # noqa: E402
from nestcheck.validation import ErrorEntry, ValidationError, validate, validate_strict  # noqa: E402


def load_schema(target: str) -> Tuple[Mapping[Any, Any], Mapping[str, Any]]:
    """Resolve ``module:ATTRIBUTE`` or a registered schema name.

    Returns the schema and its registered default options.
    """
    if ":" in target:
        module_path, _, attribute = target.partition(":")
        module = importlib.import_module(module_path)
        return getattr(module, attribute), {}
    entry = resolve_schema(target)
    return entry.schema, entry.options


def load_document(path: Path) -> Any:
    text = path.read_text()
    if path.suffix.lower() in {".yaml", ".yml"}:
        return yaml.safe_load(text)
    return json.loads(text)


def check_document(
    document: Any,
    schema: Mapping[Any, Any],
    *,
    strict: bool = False,
    shallow_strict: bool = False,
    verbose: bool = False,
) -> List[ErrorEntry]:
    errors: List[ErrorEntry] = []
    try:
        if shallow_strict:
            validate_strict(document, schema, verbose, full=True, raise_errors=False, errors=errors)
        else:
            validate(
                document,
                schema,
                strict=strict,
                full=True,
                verbose=verbose,
                raise_errors=False,
                errors=errors,
            )
    except ValidationError as exc:
        errors = exc.entries
    return errors


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--schema", required=True, help="Registered schema name or module:ATTRIBUTE")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--strict", action="store_true", help="Reject undeclared keys at every level")
    mode.add_argument("--shallow-strict", action="store_true", help="Reject undeclared top-level keys only")
    mode.add_argument("--no-strict", action="store_true", help="Ignore the schema's registered strictness")
    parser.add_argument("--verbose", action="store_true", help="Name undeclared keys in errors")
    parser.add_argument("files", nargs="+", type=Path)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    schema, options = load_schema(args.schema)
    strict = args.strict or (
        not (args.shallow_strict or args.no_strict) and bool(options.get("strict", False))
    )

    bad = 0
    for path in args.files:
        try:
            document = load_document(path)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            print(f"Unreadable: {path}: {exc}")
            bad += 1
            continue
        errors = check_document(
            document,
            schema,
            strict=strict,
            shallow_strict=args.shallow_strict,
            verbose=args.verbose,
        )
        if errors:
            bad += 1
            print(f"Invalid: {path}")
            for entry in errors:
                print(f"  {entry}")
    print("OK" if bad == 0 else f"{bad} invalid files")
    return 1 if bad else 0


if __name__ == "__main__":
    sys.exit(main())
