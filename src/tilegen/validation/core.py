"""
Result types shared by the tiling and decal checks.

A check walks a grid and its derived artifacts and records one
``ValidationIssue`` per broken rule. Rule codes are prefixed by the artifact
they concern (``TILE-`` for rectangles, ``DECAL-`` for decals).
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional


class Severity(Enum):
    """How bad an issue is. Only FAIL makes a result fail."""
    INFO = auto()
    WARN = auto()
    FAIL = auto()

    def __str__(self) -> str:
        return self.name


class ValidationStage(Enum):
    """Which derived artifact a result was computed for."""
    COMBINE = "combine"
    DECALS = "decals"

    def __str__(self) -> str:
        return self.value


@dataclass
class ValidationIssue:
    """One broken rule.

    Attributes:
        severity: INFO, WARN or FAIL
        code: Rule code, e.g. "TILE-003"
        message: What is wrong
        location: Cell or rectangle it was found at, e.g. "(3,1)" or "2x2@(0,0)"
        remediation: Suggested fix, if there is one
    """
    severity: Severity
    code: str
    message: str
    location: Optional[str] = None
    remediation: Optional[str] = None

    def format(self) -> str:
        where = self.location or '-'
        fix = self.remediation or 'N/A'
        return f"[{self.severity}] {self.code} at={where} :: {self.message} :: fix={fix}"

    def __str__(self) -> str:
        return self.format()


@dataclass
class ValidationResult:
    issues: List[ValidationIssue] = field(default_factory=list)
    stage: Optional[ValidationStage] = None

    def _with_severity(self, severity: Severity) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == severity]

    @property
    def passed(self) -> bool:
        return not self._with_severity(Severity.FAIL)

    @property
    def failed(self) -> bool:
        return not self.passed

    @property
    def warnings(self) -> List[ValidationIssue]:
        return self._with_severity(Severity.WARN)

    @property
    def errors(self) -> List[ValidationIssue]:
        return self._with_severity(Severity.FAIL)

    def code_counts(self) -> Dict[str, int]:
        """Number of issues per rule code."""
        return dict(Counter(i.code for i in self.issues))

    def add_issue(self, issue: ValidationIssue) -> None:
        self.issues.append(issue)

    def fail(self, code: str, message: str, location: Optional[str] = None,
             remediation: Optional[str] = None) -> None:
        self.add_issue(ValidationIssue(Severity.FAIL, code, message, location, remediation))

    def merge(self, other: 'ValidationResult') -> 'ValidationResult':
        """Append the issues of ``other``. Returns self."""
        self.issues.extend(other.issues)
        return self

    def report(self) -> str:
        """Multi-line report, FAIL issues first."""
        if not self.issues:
            return "Validation passed: No issues found"

        status = "PASSED" if self.passed else "FAILED"
        stage = f" ({self.stage})" if self.stage else ""
        lines = [f"Validation {status}{stage}: {len(self.issues)} issue(s)"]

        for severity in (Severity.FAIL, Severity.WARN, Severity.INFO):
            found = self._with_severity(severity)
            if found:
                lines.append(f"{severity.name} ({len(found)}):")
                lines.extend(f"  {issue.format()}" for issue in found)
        return "\n".join(lines)
