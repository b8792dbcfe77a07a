import os

server_mode = os.getenv("BIKESHARE_MODE", "development")
"""The operational mode of the service."""

pwhash_strength = os.getenv("BIKESHARE_PWHASH_STRENGTH", "interactive")
"""How expensive password hashing is. One of min, interactive, moderate or sensitive."""
