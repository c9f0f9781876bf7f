from __future__ import annotations

import csv
import sys
from pathlib import Path

from courier_routes.config import get_settings
from courier_routes.logging_setup import setup_logging
from courier_routes.core.postcode import get_outward_postcode, get_inward_postcode
from courier_routes.core.routing import lookup_postal_code
from courier_routes.core.storage import get_store, load_schedule_book

RUN = "resolve_postcodes"
FIELDS = ["postcode", "outward", "inward", "route", "date", "areas", "restricted", "valid"]


def read_postcodes(path: Path) -> list[str]:
    """One postcode per line, or the first column of a CSV (header optional)."""
    out: list[str] = []
    with path.open(encoding="utf-8", newline="") as f:
        for row in csv.reader(f):
            if not row or not row[0].strip():
                continue
            v = row[0].strip()
            if v.lower() in ("postcode", "postal_code", "postalcode"):
                continue
            out.append(v)
    return out


def run(in_path: str | Path, out_path: str | Path | None = None) -> Path:
    s = get_settings()
    logger = setup_logging(RUN, s.log_dir, s.log_level)

    in_path = Path(in_path)
    out_path = Path(out_path) if out_path else s.log_dir / "postcode_routes.csv"
    out_path.parent.mkdir(parents=True, exist_ok=True)

    logger.info(f"=== resolve_postcodes: {in_path} ===")
    book = load_schedule_book(get_store(s))
    postcodes = read_postcodes(in_path)

    counts = {"resolved": 0, "restricted": 0, "unknown": 0}
    with out_path.open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for pc in postcodes:
            r = lookup_postal_code(pc, book)
            if r.is_restricted:
                counts["restricted"] += 1
            elif r.route:
                counts["resolved"] += 1
            else:
                counts["unknown"] += 1
                logger.warning(f"No route for {pc!r}")
            w.writerow({
                "postcode": pc,
                "outward": get_outward_postcode(pc),
                "inward": get_inward_postcode(pc),
                "route": r.route or "",
                "date": r.date or "",
                "areas": "; ".join(r.areas),
                "restricted": int(r.is_restricted),
                "valid": int(r.is_valid),
            })

    logger.info(
        f"Done. {len(postcodes)} postcodes: {counts['resolved']} resolved, "
        f"{counts['restricted']} restricted, {counts['unknown']} unknown"
    )
    logger.info(f"Wrote: {out_path}")
    return out_path


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("usage: python -m courier_routes.pipeline.resolve_postcodes <postcodes.txt> [out.csv]")
        sys.exit(2)
    run(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None)
