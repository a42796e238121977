"""HTTP API for rendering comment threads."""
