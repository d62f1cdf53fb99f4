"""Durable key-value slots holding whole serialized documents."""

from winning.storage.slot import KeyValueSlot, MemorySlot, SqlSlot

__all__ = ["KeyValueSlot", "MemorySlot", "SqlSlot"]
