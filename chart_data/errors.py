"""
Error types raised by chart construction, layout and rendering.
All failures are local and synchronous - nothing is retried internally.
"""


class ChartError(Exception):
    """Base class for every chart failure."""


class ConfigError(ChartError, ValueError):
    """Missing or malformed configuration (e.g. empty category list)."""


class ChartDataError(ChartError, ValueError):
    """Data that cannot be drawn by the chosen variant (e.g. zero-sum pie)."""


class NoDataError(ChartError, ValueError):
    """Render attempted before any series was added."""


class TemplateError(ChartError):
    """
    Markup expansion failed.
    Wraps the template engine's diagnostic so callers can see what broke.
    """

    def __init__(self, message: str, template_name: str = None):
        self.template_name = template_name
        if template_name:
            message = f"Template error in '{template_name}': {message}"
        else:
            message = f"Template error: {message}"
        super().__init__(message)
