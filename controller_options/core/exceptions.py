"""
Exceptions raised while loading and validating controller options.
"""

from typing import List, Union


class ConfigError(Exception):
    """A config file could not be read or holds values of the wrong type."""


class OptionsValidationError(ValueError):
    """
    One or more option fields failed validation.

    Each failure is kept unchanged in ``errors``; delegated validators'
    exceptions are stored as-is, nameserver failures as message strings.
    """

    def __init__(self, errors: List[Union[str, Exception]]):
        self.errors = list(errors)
        super().__init__(self._format(self.errors))

    @staticmethod
    def _format(errors: List[Union[str, Exception]]) -> str:
        messages = [str(e) for e in errors]
        if len(messages) == 1:
            return messages[0]
        return "[" + ", ".join(messages) + "]"
