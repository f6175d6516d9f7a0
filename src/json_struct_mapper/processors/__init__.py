"""Processors for converting between mappings and record trees."""

from .shape_builder import ShapeBuilder
from .record_flattener import RecordFlattener
from .template_reset import TemplateReset
from .compactor import Compactor

__all__ = ["ShapeBuilder", "RecordFlattener", "TemplateReset", "Compactor"]
