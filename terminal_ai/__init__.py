"""Terminal AI API: completion proxy with conversational memory."""

__version__ = "0.1.0"
