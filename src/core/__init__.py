"""Application core: configuration and service wiring."""
