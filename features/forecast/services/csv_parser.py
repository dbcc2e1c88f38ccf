import logging
from typing import List

from features.forecast.models.forecast_types import RawRecord

logger = logging.getLogger(__name__)

def parse_csv(text: str) -> List[RawRecord]:
    """Parse the surf feed into one record per data row.

    The feed has no quoting, so rows are split on every comma. A row with
    fewer fields than the header leaves the missing trailing fields as None;
    extra fields are ignored. Whitespace-only lines are skipped.
    """
    if not text or not text.strip():
        return []

    lines = text.strip().splitlines()
    headers = [h.strip() for h in lines[0].split(',')]

    records: List[RawRecord] = []
    for line in lines[1:]:
        if not line.strip():
            continue
        values = line.split(',')
        if len(values) < len(headers):
            logger.debug(f"Short row ({len(values)}/{len(headers)} fields): {line!r}")
        records.append({
            header: values[i] if i < len(values) else None
            for i, header in enumerate(headers)
        })
    return records
