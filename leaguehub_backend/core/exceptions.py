# exceptions.py
# Domain errors. Validation errors subclass ValueError so routes can keep
# translating ValueError into HTTP 400.


class LeagueValidationError(ValueError):
    """A write was rejected by a league rule (nothing was applied)."""


class AuthenticationError(Exception):
    """Username/password did not match a known user."""


class NotFoundError(LookupError):
    """The referenced team, player or match does not exist."""
