"""msgvault - at-rest encryption for stored chat message content."""

__version__ = "0.1.0"
