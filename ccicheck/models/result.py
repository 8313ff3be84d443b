"""Result models for a validation run"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class CheckResult:
    """Result of a single input check"""
    name: str
    passed: bool
    message: Optional[str] = None
    diagnostics: List[str] = field(default_factory=list)


@dataclass
class ValidationReport:
    """Results of every check run for one set of inputs"""
    results: List[CheckResult] = field(default_factory=list)

    def add(self, result: CheckResult):
        self.results.append(result)

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    @property
    def failures(self) -> List[Tuple[str, str]]:
        """(name, message) pairs of the failed checks, in run order"""
        return [(r.name, r.message) for r in self.results if not r.passed]

    def get(self, name: str) -> Optional[CheckResult]:
        for result in self.results:
            if result.name == name:
                return result
        return None
