"""LIFE OS ledger: extraction of expenses and day plans into per-user timelines."""
