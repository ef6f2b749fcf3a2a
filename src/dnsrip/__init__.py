from __future__ import annotations

from .parser import ClassificationResult, InputType, classify

__all__ = ["ClassificationResult", "InputType", "classify"]
