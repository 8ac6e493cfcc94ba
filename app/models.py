from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class SourceRequest(BaseModel):
    apiUrl: Optional[str] = Field(None, description="URL returning a JSON array of records")


class DatasetInfo(BaseModel):
    dataset_id: str
    dataset_name: str
    row_count: int
    column_count: int
    detected_domain: str
    ingestion_timestamp: str


class ColumnProfile(BaseModel):
    column_name: str
    inferred_data_type: str
    null_count: int
    null_ratio: float
    unique_count: int
    unique_ratio: float
    sample_values_masked: List[Any]


class DatasetMetadata(BaseModel):
    dataset: DatasetInfo
    columns: List[ColumnProfile]
    numeric_stats: Dict[str, Any] = Field(default_factory=dict)
    categorical_stats: Dict[str, Any] = Field(default_factory=dict)
    temporal_stats: Dict[str, Any] = Field(default_factory=dict)
    patterns: Dict[str, Any] = Field(default_factory=dict)
    compliance_flags: Dict[str, Any] = Field(default_factory=dict)


class ErrorMessage(BaseModel):
    message: str
    error: Optional[str] = None
