"""Ledger package: append-only, per-owner record storage."""

from .store import Ledger, LedgerCollection, LedgerView  # noqa: F401
