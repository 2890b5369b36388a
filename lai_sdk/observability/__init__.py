"""Logging helpers shared by provider adapters."""

from .logging import ProviderLogger, RequestTrace

__all__ = ["ProviderLogger", "RequestTrace"]
