"""
Validator base class

[Role]
- Input normalization shared by every identifier validator
- Common interface definition
"""
import re
from abc import ABC, abstractmethod


# Separators a user may type between digit groups (spaces, tabs, hyphens)
SEPARATOR_PATTERN = re.compile(r'[\s-]')


def normalize(value: str) -> str:
    """
    Strip separators from a raw identifier.

    Only whitespace and hyphens are removed. Anything else is left in place
    so that the structural check can reject it.
    """
    return SEPARATOR_PATTERN.sub('', value)


class BaseValidator(ABC):
    """Validator base class"""

    @staticmethod
    def normalize(value: str) -> str:
        """Remove whitespace and hyphen separators"""
        return normalize(value)

    @abstractmethod
    def validate(self, value: str, context: str = "") -> bool:
        """
        Basic validation

        Args:
            value: value to check
            context: surrounding text (informational only)

        Returns:
            bool: True when the value is well formed
        """
        pass
