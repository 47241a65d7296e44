"""Serviços por recurso."""

from .mandates import MandateService

__all__ = ["MandateService"]
