from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .models import LedgerItem

logger = logging.getLogger(__name__)


class LedgerFormatError(ValueError):
    pass


class LedgerStore:
    """
    Read-only transaction ledger on disk.

      *.json   a JSON array of transaction objects
      *.jsonl  one JSON object per line (blank lines ignored)

    Records that fail validation are skipped and logged, unless strict=True,
    in which case the first bad record raises LedgerFormatError.
    """

    def __init__(self, path: Path, strict: bool = False):
        self.path = Path(path)
        self.strict = strict
        self.skipped = 0

    def _iter_raw(self) -> list[tuple[str, Any]]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise LedgerFormatError(f"{self.path}: not UTF-8 text: {e.reason}") from e
        except OSError as e:
            raise LedgerFormatError(f"{self.path}: cannot read ledger: {e.strerror or e}") from e

        if self.path.suffix.lower() == ".jsonl":
            out: list[tuple[str, Any]] = []
            for lineno, line in enumerate(text.splitlines(), start=1):
                if not line.strip():
                    continue
                where = f"line {lineno}"
                try:
                    out.append((where, json.loads(line)))
                except json.JSONDecodeError as e:
                    self._reject(where, f"invalid JSON: {e.msg}")
            return out

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise LedgerFormatError(f"{self.path}: invalid JSON: {e.msg} (line {e.lineno})") from e

        if not isinstance(data, list):
            raise LedgerFormatError(f"{self.path}: expected a JSON array of transactions")

        return [(f"item {i}", obj) for i, obj in enumerate(data)]

    def _reject(self, where: str, reason: str) -> None:
        if self.strict:
            raise LedgerFormatError(f"{self.path}: {where}: {reason}")
        self.skipped += 1
        logger.warning("Skipping ledger record %s in %s: %s", where, self.path, reason)

    def load(self) -> list[LedgerItem]:
        if not self.path.exists():
            raise FileNotFoundError(f"Ledger file not found: {self.path}")
        if not self.path.is_file():
            raise LedgerFormatError(f"{self.path}: not a regular file")

        self.skipped = 0
        items: list[LedgerItem] = []

        for where, obj in self._iter_raw():
            if not isinstance(obj, dict):
                self._reject(where, "expected a JSON object")
                continue
            try:
                items.append(LedgerItem.model_validate(obj))
            except ValidationError as e:
                fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
                self._reject(where, f"invalid fields: {fields}")

        logger.info("Loaded %d transactions from %s (skipped %d)", len(items), self.path, self.skipped)
        return items
