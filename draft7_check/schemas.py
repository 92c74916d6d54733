"""Pydantic schemas for manifests and validation reports."""

from datetime import datetime
from typing import Any, ClassVar, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel

from draft7_check.models import ValidationType


class ReportModel(BaseModel):
    """Base for report shapes: camelCase on the wire, frozen once built."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    # Optional fields dropped from the serialized form when unset
    omit_when_none: ClassVar[tuple[str, ...]] = ()

    @model_serializer(mode="wrap")
    def _omit_unset_fields(self, handler) -> dict[str, Any]:
        data = handler(self)
        for name in self.omit_when_none:
            alias = type(self).model_fields[name].alias
            for key in (name, alias):
                if key in data and data[key] is None:
                    del data[key]
        return data

    def to_json_dict(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict using the wire (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True)


class ErrorDescriptor(ReportModel):
    """A single validation error; opaque beyond ``message``."""

    model_config = ConfigDict(extra="allow")

    omit_when_none: ClassVar[tuple[str, ...]] = (
        "instance_path",
        "schema_path",
        "keyword",
    )

    message: str = Field(..., description="Human-readable error message")
    instance_path: str | None = Field(
        None, description="JSON pointer into the checked schema document"
    )
    schema_path: str | None = Field(
        None, description="JSON pointer into the Draft-7 meta-schema"
    )
    keyword: str | None = Field(None, description="Meta-schema keyword that failed")


class ValidationResult(ReportModel):
    """Verdict for one schema document."""

    omit_when_none: ClassVar[tuple[str, ...]] = (
        "compilation_error",
        "validation_error",
    )

    valid: bool
    errors: list[ErrorDescriptor] = Field(default_factory=list)
    schema_name: str
    schema_document: Any = Field(None, alias="schema")
    validation_type: ValidationType
    compilation_error: bool | None = None
    validation_error: bool | None = None

    @model_validator(mode="after")
    def check_verdict(self) -> Self:
        if self.valid:
            if self.errors:
                raise ValueError("a valid result cannot carry errors")
            if self.validation_type != ValidationType.COMPILATION:
                raise ValueError("a valid result must end at the compilation phase")
        elif not self.errors:
            raise ValueError("an invalid result needs at least one error")
        return self


class SchemaReport(ReportModel):
    """Envelope written for a single-schema run."""

    timestamp: datetime
    schema_path: str
    result: ValidationResult

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime, _info) -> str:
        """Serialize datetime to ISO format string."""
        return value.isoformat()


class ManifestEntry(BaseModel):
    """One schema file to batch-validate."""

    name: str
    path: str
    description: str | None = None


class Manifest(BaseModel):
    """Ordered list of schema references driving a batch run."""

    schemas: list[ManifestEntry]


class BatchEntryResult(ReportModel):
    """Result for one manifest entry."""

    name: str
    description: str = ""
    path: str
    result: ValidationResult


class BatchReport(ReportModel):
    """Aggregated results of a batch run, in manifest order."""

    timestamp: datetime
    config_path: str
    schemas: list[BatchEntryResult] = Field(default_factory=list)

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime, _info) -> str:
        """Serialize datetime to ISO format string."""
        return value.isoformat()

    @property
    def total_count(self) -> int:
        return len(self.schemas)

    @property
    def valid_count(self) -> int:
        return sum(1 for entry in self.schemas if entry.result.valid)

    @property
    def all_valid(self) -> bool:
        return self.valid_count == self.total_count
