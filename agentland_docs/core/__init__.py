"""Core — models, configuration, services, and use cases."""
