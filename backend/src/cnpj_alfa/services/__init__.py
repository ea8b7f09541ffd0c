"""
Services package - Application-level orchestration over the domain.
"""

from .report import describe, describe_batch

__all__ = ["describe", "describe_batch"]
