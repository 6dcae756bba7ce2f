"""Config – 12-factor settings loading and validation."""
