"""Parse exported chat history HTML into messages and filter them with queries."""

__version__ = "0.1.0"