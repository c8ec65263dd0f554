"""Fact source reading a facter-style JSON document from disk."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from dumpsizer.errors import FactSourceError

from .schema import FactsDocument
from .translator import to_snapshot

if TYPE_CHECKING:
    from pathlib import Path

    from dumpsizer.domain.facts import FactSnapshot

log = getLogger(__name__)


def parse_facts(raw: str | bytes) -> FactSnapshot:
    try:
        document = FactsDocument.model_validate_json(raw)
    except ValidationError as exc:
        raise FactSourceError(f"Invalid facts document: {exc}") from exc
    return to_snapshot(document)


@dataclass(slots=True, frozen=True)
class JsonFactSource:
    path: Path

    def __call__(self) -> FactSnapshot:
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise FactSourceError(f"Cannot read facts file {self.path}: {exc}") from exc
        log.debug("Loaded %s bytes of facts from %s", len(raw), self.path)
        return parse_facts(raw)
