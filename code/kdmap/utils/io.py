from __future__ import annotations

import csv
from pathlib import Path
from typing import List, Tuple

from kdmap.errors import InvalidPairError

from .loggers import log_pairs_loaded

__all__ = ["read_pairs_csv"]


def _parse_value(raw: str, where: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise InvalidPairError(f"{where}: value must be an integer, got {raw!r}") from exc


def read_pairs_csv(path: Path | str, *, header: bool = True) -> List[Tuple[str, int]]:
    """Read ``key,value`` rows from a CSV file.

    With ``header=True`` the file must have ``key`` and ``value`` columns
    (other columns are ignored); otherwise the first two columns are used.
    Blank lines are skipped. Keys are kept verbatim.
    """
    p = Path(path)
    out: List[Tuple[str, int]] = []
    with p.open("r", newline="", encoding="utf-8") as f:
        if header:
            reader = csv.DictReader(f)
            cols = set(reader.fieldnames or ())
            missing = {"key", "value"} - cols
            if missing:
                raise InvalidPairError(
                    f"{p}: missing column(s) {', '.join(sorted(missing))} in CSV header"
                )
            for row in reader:
                where = f"{p}:{reader.line_num}"
                out.append((row["key"], _parse_value(row["value"] or "", where)))
        else:
            reader_rows = csv.reader(f)
            for lineno, row in enumerate(reader_rows, start=1):
                if not row:
                    continue
                where = f"{p}:{lineno}"
                if len(row) < 2:
                    raise InvalidPairError(f"{where}: expected 2 columns, got {len(row)}")
                out.append((row[0], _parse_value(row[1], where)))

    log_pairs_loaded(len(out), str(p))
    return out
