class ConfigError(ValueError):
    """Raised when speedtype.config.json holds an unusable value."""
