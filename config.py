"""
Service configuration.
Only the HTTP service reads this - the chart core takes everything as arguments.
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


# Application Configuration
APP_CONFIG = {
    "debug": os.getenv("DEBUG", "false").lower() == "true",
    "name": "SVG Chart Engine",
    "version": "1.0.0",

    # Server settings
    "host": os.getenv("HOST", "0.0.0.0"),
    "port": int(os.getenv("PORT", "8000")),

    # Request limits
    "max_series_per_request": int(os.getenv("MAX_SERIES_PER_REQUEST", "50")),
    "max_categories_per_request": int(os.getenv("MAX_CATEGORIES_PER_REQUEST", "500")),

    # External stylesheet applied when a request sets none
    "default_style_sheet": os.getenv("DEFAULT_STYLE_SHEET", "") or None
}

# Logging Configuration
LOG_CONFIG = {
    "level": "INFO" if not APP_CONFIG["debug"] else "DEBUG",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
}


def check_config():
    """Check configuration and provide helpful messages."""
    import logging

    logger = logging.getLogger(__name__)

    if APP_CONFIG["max_series_per_request"] < 1:
        logger.warning("MAX_SERIES_PER_REQUEST is below 1 - every render request will be rejected")

    if APP_CONFIG["default_style_sheet"]:
        logger.info(f"Charts reference external stylesheet: {APP_CONFIG['default_style_sheet']}")
    else:
        logger.info("Charts embed the default stylesheet")

    if APP_CONFIG["debug"]:
        logger.info(f"Starting {APP_CONFIG['name']} (Debug Mode)")
        logger.info(f"Listening on {APP_CONFIG['host']}:{APP_CONFIG['port']}")


# Run config check on import
check_config()
