"""Schemas, RNG and JSONL helpers."""
