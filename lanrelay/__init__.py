"""Input events, scancode translation, modifier tracking and input emulation bookkeeping."""

__version__ = "0.3.0"