class InvariantViolation(Exception):
    """Raised when course content breaks a structural rule."""
