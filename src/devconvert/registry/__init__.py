"""Conversion descriptors and the converter registry."""

from .base import ConversionSpec, Transformer
from .registry import ConverterRegistry, create_default_registry

__all__ = ["ConversionSpec", "ConverterRegistry", "Transformer", "create_default_registry"]
