from .upper_case import PW_UPPER_CASE

__all__ = [
    "PW_UPPER_CASE",
]
