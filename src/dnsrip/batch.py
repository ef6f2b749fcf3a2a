from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO

from .parser import InputType, classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseSummary:
    total: int
    ip: int
    hostname: int
    invalid: int
    unique_parsed: int
    written: int
    elapsed_ms: int


def iter_inputs(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield host identifiers from text lines.

    - Skips blank lines and lines starting with '#'.
    - Allows inline comments after '#'.
    """
    for raw_line in lines:
        line = raw_line.split("#", 1)[0].strip()
        if not line:
            continue
        yield line


def classify_all(
    inputs: Iterable[str],
    *,
    out: TextIO,
    types: set[InputType] | None = None,
    dedupe: bool = False,
) -> ParseSummary:
    start = time.time()
    counts = {kind: 0 for kind in InputType}
    seen: set[str] = set()
    written = 0

    for item in inputs:
        result = classify(item)
        counts[result.type] += 1
        if result.parsed is not None:
            if dedupe and result.parsed in seen:
                continue
            seen.add(result.parsed)
        if types is not None and result.type not in types:
            continue
        out.write(json.dumps(result.to_dict()) + "\n")
        written += 1

    summary = ParseSummary(
        total=sum(counts.values()),
        ip=counts[InputType.IP],
        hostname=counts[InputType.HOSTNAME],
        invalid=counts[InputType.INVALID],
        unique_parsed=len(seen),
        written=written,
        elapsed_ms=int((time.time() - start) * 1000),
    )
    logger.info(
        "classified total=%d ip=%d hostname=%d invalid=%d",
        summary.total,
        summary.ip,
        summary.hostname,
        summary.invalid,
    )
    return summary
