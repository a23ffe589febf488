"""Storage backends for the domain repositories."""
