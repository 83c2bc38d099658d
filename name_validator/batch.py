from __future__ import annotations

import logging
from typing import List, Sequence

from .models import BatchSummary, ValidationResult
from .validator import NameValidator

logger = logging.getLogger(__name__)


async def run_batch(names: Sequence[str], validator: NameValidator) -> BatchSummary:
    """
    Validate `names` one after another, in input order.

    Each validation is awaited before the next request is issued.
    """
    results: List[ValidationResult] = []
    for name in names:
        results.append(await validator.validate(name))

    logger.info("Validated %d names", len(results))
    return BatchSummary(validated=len(names), results=results)
