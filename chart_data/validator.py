"""
Configuration validation layer.
Checks the hard requirements of a chart before any layout happens.
"""

from typing import List

from chart_data.errors import ConfigError
from chart_data.options import ChartOptions


class ConfigValidator:
    """
    Validates resolved options.
    Ensures:
    1. The category list was supplied and is not empty
    2. Category names are unique
    """

    def validate_options(self, options: ChartOptions) -> List[str]:
        """
        Validate resolved options.
        Returns list of validation errors, empty list if valid.
        """
        errors = []

        categories = options.categories
        if not categories:
            errors.append("fields was not supplied or is empty")
            return errors

        seen = set()
        duplicates = []
        for category in categories:
            if category in seen and category not in duplicates:
                duplicates.append(category)
            seen.add(category)
        if duplicates:
            errors.append(f"Category names must be unique, repeated: {duplicates}")

        return errors

    def check(self, options: ChartOptions) -> None:
        """Raise ConfigError when the options cannot produce a chart."""
        errors = self.validate_options(options)
        if errors:
            raise ConfigError("; ".join(errors))
