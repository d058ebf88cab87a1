"""Tagged buffer allocation tracking with bulk release, a status report and a demo command."""

__version__ = "0.1.0"
__all__ = ["collector", "status", "cli"]