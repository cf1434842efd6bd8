"""
Contract Validation Module

Модуль для валидации входных JSON контрактов.
"""

from .validators import (
    SCHEMA_DIR,
    SchemaLoader,
    ShareSetContractError,
    ShareSetValidator,
    default_validator,
    validate_share_set,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ShareSetValidator",
    # Exceptions
    "ShareSetContractError",
    # Functions
    "default_validator",
    "validate_share_set",
    # Constants
    "SCHEMA_DIR",
]
