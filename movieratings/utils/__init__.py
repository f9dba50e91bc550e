"""
Shared utilities package.

This package contains logging configuration, request validators, and other
shared utilities used across the application.
"""

from movieratings.utils.logging_config import setup_logging, get_logger
from movieratings.utils.validators import (
    JsonApiModel,
    RelatedResource,
    ResourceRequest,
    ValidationResult,
    validate_resource,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'JsonApiModel',
    'RelatedResource',
    'ResourceRequest',
    'ValidationResult',
    'validate_resource',
]
