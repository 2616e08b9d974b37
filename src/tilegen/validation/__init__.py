"""
Validation of derived tile artifacts.

Public API:
    - ValidationResult, ValidationIssue, Severity: Core result types
    - ValidationStage: Derivation step enumeration
    - validate_tiling: Rectangle cover checks
    - validate_decals: Edge decal checks
"""

from .core import (
    Severity,
    ValidationStage,
    ValidationIssue,
    ValidationResult,
)
from .checks import validate_tiling, validate_decals, exposed_side_facts

__all__ = [
    'Severity',
    'ValidationStage',
    'ValidationIssue',
    'ValidationResult',
    'validate_tiling',
    'validate_decals',
    'exposed_side_facts',
]
