from __future__ import annotations

import argparse
import contextlib
import itertools
import json
import sys
from pathlib import Path
from typing import Iterable

from .batch import classify_all, iter_inputs
from .logging_cfg import setup_logging
from .parser import InputType
from .version import get_version

_SCHEMA_VERSION = 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="dnsrip")
    parser.add_argument("--version", action="version", version=get_version())

    sub = parser.add_subparsers(dest="cmd", required=True)
    p_parse = sub.add_parser("parse", help="Classify inputs as IP, hostname or invalid")
    p_parse.add_argument("inputs", nargs="*", metavar="INPUT", help="Host identifiers to classify")
    p_parse.add_argument(
        "--file",
        default=None,
        help="Read inputs from a file, one per line ('#' comments allowed; use '-' for stdin)",
    )
    p_parse.add_argument(
        "--out",
        default="-",
        help="Output path (use '-' for stdout)",
    )
    p_parse.add_argument(
        "--type",
        action="append",
        choices=[kind.value for kind in InputType],
        help="Only write records with these types (repeatable)",
    )
    p_parse.add_argument(
        "--dedupe",
        action="store_true",
        help="Only write the first record for each parsed host",
    )
    p_parse.add_argument(
        "--summary-json",
        action="store_true",
        help="Print parse summary as JSON to stderr",
    )
    p_parse.add_argument(
        "--fail-on-invalid",
        action="store_true",
        help="Exit non-zero if any input is invalid",
    )
    p_parse.set_defaults(func=_run_parse)

    args = parser.parse_args(argv)
    setup_logging()
    return int(args.func(args))


def _run_parse(args: argparse.Namespace) -> int:
    if not args.inputs and args.file is None:
        print("error: provide at least one INPUT or --file", file=sys.stderr)
        return 2

    types = {InputType(t) for t in args.type} if args.type else None

    try:
        with contextlib.ExitStack() as stack:
            inputs: Iterable[str] = list(args.inputs)
            if args.file is not None:
                stream = (
                    sys.stdin
                    if args.file == "-"
                    else stack.enter_context(Path(args.file).open("r", encoding="utf-8"))
                )
                inputs = itertools.chain(inputs, iter_inputs(stream))

            out = sys.stdout
            if args.out != "-":
                out_path = Path(args.out)
                out_path.parent.mkdir(parents=True, exist_ok=True)
                out = stack.enter_context(out_path.open("w", encoding="utf-8"))

            summary = classify_all(inputs, out=out, types=types, dedupe=bool(args.dedupe))
    except FileNotFoundError as e:
        print(f"error: file not found: {e.filename}", file=sys.stderr)
        return 2
    except UnicodeDecodeError as e:
        print(f"error: {args.file} is not valid UTF-8 text: {e.reason}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    dest = "stdout" if args.out == "-" else str(args.out)
    if args.summary_json:
        sys.stderr.write(
            json.dumps(
                {
                    "kind": "parse_summary",
                    "schema_version": _SCHEMA_VERSION,
                    "total": summary.total,
                    "ip": summary.ip,
                    "hostname": summary.hostname,
                    "invalid": summary.invalid,
                    "unique": summary.unique_parsed,
                    "wrote": summary.written,
                    "elapsed_ms": summary.elapsed_ms,
                    "out": dest,
                }
            )
            + "\n"
        )
    else:
        print(
            "parsed"
            f" total={summary.total}"
            f" ip={summary.ip}"
            f" hostname={summary.hostname}"
            f" invalid={summary.invalid}"
            f" unique={summary.unique_parsed}"
            f" wrote={summary.written}"
            f" elapsed_ms={summary.elapsed_ms}"
            f" out={dest}",
            file=sys.stderr,
        )
    return 1 if args.fail_on_invalid and summary.invalid else 0


if __name__ == "__main__":
    raise SystemExit(main())
