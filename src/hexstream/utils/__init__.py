"""Byte and hex digit helpers."""
