"""
Data Transformers - Transform Layer

Pure functions turning the raw programs body into agency values.
Records are untyped JSON objects; no schema is assumed or enforced.
"""

import json
from typing import Any, Dict, List
import logging

logger = logging.getLogger(__name__)

AGENCY_FIELD = "agency"


def parse_records(text: str) -> List[Dict[str, Any]]:
    """
    Parse the raw body into a list of records

    Args:
        text: Raw JSON text, expected to be an array of objects

    Returns:
        List[Dict]: Records in response order

    Raises:
        json.JSONDecodeError: If the text is not valid JSON
        TypeError: If the JSON is not an array
    """
    try:
        records = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in programs response: {e}")
        raise

    if not isinstance(records, list):
        raise TypeError(
            f"Expected a JSON array of records, got {type(records).__name__}"
        )

    logger.debug(f"Parsed {len(records)} records")
    return records


def agencies_from_records(records: List[Dict[str, Any]]) -> List[Any]:
    """
    Read the agency of every record, keeping order and length

    Args:
        records: Parsed records

    Returns:
        List: One value per record, None where the key is absent

    Raises:
        TypeError: If a record is not a JSON object
    """
    agencies = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise TypeError(
                f"Record {index} is not a JSON object: {type(record).__name__}"
            )
        agencies.append(record.get(AGENCY_FIELD))

    missing = sum(1 for agency in agencies if agency is None)
    if missing:
        logger.debug(f"{missing} of {len(agencies)} records have no {AGENCY_FIELD}")

    return agencies


def extract_agencies(text: str) -> List[Any]:
    """Parse the raw body and return the agency of each record"""
    return agencies_from_records(parse_records(text))


extract = extract_agencies
