"""Configuration, security helpers and service wiring."""
