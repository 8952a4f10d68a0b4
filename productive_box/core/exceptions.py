class ConfigurationError(Exception):
    """Raised when required settings are missing or invalid."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required configuration: {', '.join(missing)}")
