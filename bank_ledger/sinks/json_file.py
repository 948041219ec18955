"""JSON file sink for exporting ledger snapshots."""

import json
from pathlib import Path

from bank_ledger.exceptions import PersistenceError
from bank_ledger.logging import get_logger
from bank_ledger.models import Account
from bank_ledger.sinks.serialization import account_to_dict

logger = get_logger(__name__)


class JsonFileSink:
    """Output records to JSON files, one file per entity type."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Account]) -> Path:
        """Write a batch of records to ``<entity_type>.json`` and return its path."""
        file_path = self.output_dir / f"{entity_type}.json"

        data = [account_to_dict(record) for record in records]

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
        except OSError as exc:
            raise PersistenceError(f"Cannot write {file_path}: {exc}") from exc

        self._counts[entity_type] = len(records)
        return file_path

    def close(self) -> dict[str, int]:
        """Log a summary and return record counts per entity type."""
        logger.info("JSON files written to: %s", self.output_dir)
        for entity_type, count in self._counts.items():
            logger.info("  %s: %d records", entity_type, count)
        return dict(self._counts)
