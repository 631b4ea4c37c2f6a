"""LP parsing and cross-reference validation."""
