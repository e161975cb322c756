"""Generation layer for Ad Assistant.

This package contains the provider interface, the Gemini provider, output
guards and the audit trail. It has ZERO dependency on any UI framework.
"""

__version__ = "0.1.0"
