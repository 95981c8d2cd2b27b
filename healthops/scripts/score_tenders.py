"""
Score tenders from a JSON export against a staffing capacity.

The file holds either a list of tender records or {"tenders": [...]}.
Exit code is 1 when any tender fails validation.

Usage:
    python -m healthops.scripts.score_tenders tenders.json --capacity 800
    python -m healthops.scripts.score_tenders tenders.json --capacity 800 --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from healthops.config import get_settings
from healthops.core.logging import configure_logging
from healthops.models.tender import TenderRecord
from healthops.scoring.parameters import ScoringParameters
from healthops.scoring.portfolio import PortfolioResult, score_portfolio

logger = logging.getLogger(__name__)

_TENDER_LIST = TypeAdapter(List[TenderRecord])


def load_tenders(path: Path) -> List[TenderRecord]:
    """Parse the JSON file into tender records."""
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("tenders", [])
    return _TENDER_LIST.validate_python(payload)


def _as_json(portfolio: PortfolioResult) -> str:
    rows = []
    for entry in portfolio.entries:
        row = {"tender_id": entry.tender_id, "status": entry.status}
        if entry.result is not None:
            r = entry.result
            row.update({
                "risk_score": r.risk_score,
                "projected_revenue": float(r.projected_revenue),
                "projected_cost": float(r.projected_cost),
                "real_margin_pct": float(r.real_margin_pct),
                "is_over_capacity": r.is_over_capacity,
                "decision": r.decision.value,
            })
        else:
            row["error"] = entry.error
        rows.append(row)
    return json.dumps(
        {"results": rows, "decision_counts": portfolio.decision_counts}, indent=2
    )


def _as_table(portfolio: PortfolioResult) -> str:
    lines = [
        f"{'TENDER':<16} {'RISK':>4} {'REVENUE':>16} {'MARGIN %':>9} {'OVER CAP':>8}  DECISION",
        "-" * 76,
    ]
    for entry in portfolio.entries:
        tender_id = entry.tender_id or "-"
        if entry.result is None:
            lines.append(f"{tender_id:<16} FAILED: {entry.error}")
            continue
        r = entry.result
        lines.append(
            f"{tender_id:<16} {r.risk_score:>4} {float(r.projected_revenue):>16,.2f} "
            f"{float(r.real_margin_pct):>9.1f} {('yes' if r.is_over_capacity else 'no'):>8}  "
            f"{r.decision.label}"
        )
    lines.append("-" * 76)
    lines.append(
        "  ".join(f"{k}={v}" for k, v in portfolio.decision_counts.items())
    )
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Score tenders for participation viability")
    parser.add_argument("file", type=Path, help="JSON file with tender records")
    parser.add_argument("--capacity", type=int, required=True,
                        help="Available full-time professionals")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings)

    try:
        tenders = load_tenders(args.file)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Could not load tenders from {args.file}: {e}")
        return 2

    portfolio = score_portfolio(
        tenders, args.capacity, ScoringParameters.from_settings(settings)
    )
    print(_as_json(portfolio) if args.json else _as_table(portfolio))
    return 1 if portfolio.tenders_failed else 0


if __name__ == "__main__":
    sys.exit(main())
