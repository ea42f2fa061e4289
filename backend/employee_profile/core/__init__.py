"""Core settings, logging, and error-handling primitives."""
