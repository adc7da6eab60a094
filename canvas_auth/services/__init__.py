"""External services used while authenticating canvas requests."""
