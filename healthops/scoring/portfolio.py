"""
scoring/portfolio.py

Scores a batch of tenders against one staffing capacity.

An invalid tender becomes a failed entry carrying the validation message;
the rest of the batch is still scored.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from healthops.core.exceptions import InvalidInputException
from healthops.models.enumerations import Decision
from healthops.models.tender import TenderRecord
from healthops.scoring.parameters import ScoringParameters
from healthops.scoring.tender_scorer import ScoringResult, TenderScoringCalculator

logger = logging.getLogger(__name__)


@dataclass
class PortfolioEntry:
    tender_id: Optional[str]
    status: str                       # "success" or "failed"
    result: Optional[ScoringResult] = None
    error: Optional[str] = None


@dataclass
class PortfolioResult:
    entries: List[PortfolioEntry]
    tenders_scored: int
    tenders_failed: int
    decision_counts: Dict[str, int] = field(default_factory=dict)


def score_portfolio(
    tenders: Iterable[TenderRecord],
    staff_capacity_units: int,
    parameters: Optional[ScoringParameters] = None,
) -> PortfolioResult:
    """Score every tender; tally decisions over the successful ones."""
    calculator = TenderScoringCalculator(parameters)
    entries: List[PortfolioEntry] = []
    counts: Counter = Counter({d.value: 0 for d in Decision})

    for tender in tenders:
        try:
            result = calculator.calculate(tender, staff_capacity_units)
        except InvalidInputException as e:
            logger.warning(f"[{tender.id or '?'}] Tender not scorable: {e}")
            entries.append(PortfolioEntry(tender_id=tender.id, status="failed", error=str(e)))
            continue
        counts[result.decision.value] += 1
        entries.append(PortfolioEntry(tender_id=tender.id, status="success", result=result))

    scored = sum(1 for e in entries if e.status == "success")
    return PortfolioResult(
        entries=entries,
        tenders_scored=scored,
        tenders_failed=len(entries) - scored,
        decision_counts=dict(counts),
    )
