"""Data models for the JSON Struct Mapper."""

from .record import Record

__all__ = ["Record"]
