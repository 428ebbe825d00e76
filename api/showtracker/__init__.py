"""Show tracker REST API."""
