"""Configuration layer — bounds models, settings, discovery, logging."""
