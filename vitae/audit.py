"""
Record of what a normalization pass left out.

Best-effort steps (URI construction, country mapping, date and email
validation, source fields with no canonical home) never fail a conversion.
They degrade one field to absent, and say so here and in the debug log.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkippedField:
    """One source value that did not make it into the canonical document."""

    path: str
    kind: str  # e.g. 'UnparseableURI', 'InvalidDateFormat', 'UnmappableSourceField'
    value: Any = None
    detail: Optional[str] = None

    def __str__(self):
        msg = f'{self.path}: {self.kind} ({self.value!r})'
        return f'{msg} {self.detail}' if self.detail else msg


@dataclass
class NormalizationAudit:
    """Collects the fields skipped while normalizing one source document."""

    skipped: list[SkippedField] = field(default_factory=list)

    def record(
        self, path: str, kind: str, value: Any = None, detail: Optional[str] = None
    ) -> None:
        entry = SkippedField(path, kind, value, detail)
        self.skipped.append(entry)
        logger.debug('Skipped %s', entry)

    def by_kind(self, kind: str) -> list[SkippedField]:
        return [s for s in self.skipped if s.kind == kind]

    @property
    def paths(self) -> list[str]:
        return [s.path for s in self.skipped]

    def __iter__(self) -> Iterator[SkippedField]:
        return iter(self.skipped)

    def __len__(self) -> int:
        return len(self.skipped)
