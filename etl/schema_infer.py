# etl/schema_infer.py
import datetime, json, uuid
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Sequence

DETECTED_DOMAIN = "API Source"
SAMPLE_SIZE = 3
MASK_THRESHOLD = 10
MASK_KEEP = 5
MASK_MARKER = "***"

# reserved for future enrichment, always emitted empty
EXTENSION_KEYS = ("numeric_stats", "categorical_stats", "temporal_stats", "patterns", "compliance_flags")


def _utcnow():
    return datetime.datetime.now(datetime.timezone.utc)


def _new_id():
    return str(uuid.uuid4())


def format_timestamp(moment: datetime.datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2026-10-19T08:30:00.000Z"""
    if moment.tzinfo is not None:
        moment = moment.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return moment.isoformat(timespec="milliseconds") + "Z"


def infer_data_type(value) -> str:
    if value is None:
        return "null"
    # bool is an int subclass, keep it out of numeric
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return "numeric"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return "datetime"
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return "object"
    return "unknown"


def mask_sample(value):
    if isinstance(value, str) and len(value) > MASK_THRESHOLD:
        return value[:MASK_KEEP] + MASK_MARKER
    return value


def _unique_key(value):
    """
    Hashable identity for distinct-value counting.
    Booleans and numbers are tagged so True and 1 stay distinct while 1 and 1.0 match.
    Composite values compare structurally via canonical JSON.
    """
    kind = infer_data_type(value)
    if kind == "object":
        try:
            return (kind, json.dumps(value, sort_keys=True, default=repr))
        except (TypeError, ValueError):
            # mixed-type keys cannot be sorted
            return (kind, repr(value))
    try:
        hash(value)
    except TypeError:
        return (kind, repr(value))
    return (kind, value)


def _column_values(records: Sequence[Any], column: str) -> List[Any]:
    values = []
    for r in records:
        if isinstance(r, Mapping):
            values.append(r.get(column))
        else:
            values.append(None)
    return values


def profile_column(column: str, values: List[Any], row_count: int) -> Dict[str, Any]:
    present = [v for v in values if v is not None]
    null_count = len(values) - len(present)
    unique_count = len({_unique_key(v) for v in present})
    return {
        "column_name": column,
        "inferred_data_type": infer_data_type(present[0] if present else None),
        "null_count": null_count,
        "null_ratio": null_count / row_count,
        "unique_count": unique_count,
        "unique_ratio": unique_count / row_count,
        "sample_values_masked": [mask_sample(v) for v in present[:SAMPLE_SIZE]],
    }


def profile_records(
    source_url: str,
    records: Sequence[Any],
    clock: Optional[Callable[[], datetime.datetime]] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> Dict[str, Any]:
    """
    Build dataset metadata for a list of flat records.
    Columns come from the keys of the first record only; later records are read
    at those keys and a missing key counts as null.
    clock and id_factory default to the current UTC time and uuid4.
    """
    clock = clock or _utcnow
    id_factory = id_factory or _new_id

    row_count = len(records)
    # empty input short-circuits here: no columns, nothing to divide by row_count
    first = records[0] if row_count and isinstance(records[0], Mapping) else {}
    keys = list(first.keys())

    column_profiles = [
        profile_column(str(k), _column_values(records, k), row_count)
        for k in keys
    ]

    metadata = {
        "dataset": {
            "dataset_id": id_factory(),
            "dataset_name": source_url,
            "row_count": row_count,
            "column_count": len(keys),
            "detected_domain": DETECTED_DOMAIN,
            "ingestion_timestamp": format_timestamp(clock()),
        },
        "columns": column_profiles,
    }
    for k in EXTENSION_KEYS:
        metadata[k] = {}
    return metadata
