"""Wire-transfer simulator: registrations, sessions, queued transfers, fees and queries."""

__version__ = "0.1.0"
__all__ = ["models", "bank", "queries", "cli"]