"""Effort-share conditioning, catchability gating and fit diagnostics for mixed-fishery models."""

__version__ = "0.1.0"
