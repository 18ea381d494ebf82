"""Multi-instance Model-View-Controller notification framework."""

__version__ = "0.1.0"
