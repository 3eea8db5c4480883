"""Configuration management for the application."""
import os

DEFAULT_SHEET_ID = '10n9xmV01j3_6pDU7QiR5DIbanIfAyYcd8rVavXT17oE'
DEFAULT_SHEET_TAB_ID = '336036379'
SHEET_FORMATS = ('gviz', 'csv')


class Config:
    """Application configuration."""

    def __init__(self):
        self.sheet_id = os.environ.get('SHEET_ID', DEFAULT_SHEET_ID)
        self.sheet_tab_id = os.environ.get('SHEET_TAB_ID', DEFAULT_SHEET_TAB_ID)
        self.sheet_format = os.environ.get('SHEET_FORMAT', 'gviz').lower()
        self.request_timeout = os.environ.get('REQUEST_TIMEOUT', '10')
        self.trade_url = os.environ.get('TRADE_URL', 'https://trade.smallcap.ai')
        self.port = os.environ.get('PORT', '8080')

        self.validate()

    def validate(self):
        """Validate configuration values."""
        errors = []
        if not self.sheet_id:
            errors.append('SHEET_ID must not be empty')
        if self.sheet_format not in SHEET_FORMATS:
            errors.append(f"SHEET_FORMAT must be one of {', '.join(SHEET_FORMATS)}")

        try:
            self.request_timeout = float(self.request_timeout)
            if self.request_timeout <= 0:
                errors.append('REQUEST_TIMEOUT must be positive')
        except (TypeError, ValueError):
            errors.append('REQUEST_TIMEOUT must be a number')

        try:
            self.port = int(self.port)
        except (TypeError, ValueError):
            errors.append('PORT must be an integer')

        if errors:
            raise ValueError(f"Invalid configuration: {'; '.join(errors)}")


# Global config instance
config = Config()
