"""Ports through which the application talks to the outside world."""
