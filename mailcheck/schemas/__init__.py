from mailcheck.schemas.validation import ValidationRequest

__all__ = [
    "ValidationRequest",
]
