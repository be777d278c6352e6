"""Leonidas: plan, approve and execute issue work with an automated agent."""

__version__ = "0.1.0"
