class InvalidCronError(ValueError):
    """Raised when a schedule expression does not have six cron fields."""
