"""Output sinks for exporting ledger data."""

from bank_ledger.sinks.json_file import JsonFileSink

__all__ = ["JsonFileSink"]
