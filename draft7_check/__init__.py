from draft7_check.models import ValidationType
from draft7_check.schemas import BatchReport, ErrorDescriptor, ValidationResult
from draft7_check.service import validate_schema_file, validate_schema_specification

__version__ = "1.0.0"

__all__ = [
    "BatchReport",
    "ErrorDescriptor",
    "ValidationResult",
    "ValidationType",
    "validate_schema_file",
    "validate_schema_specification",
]
