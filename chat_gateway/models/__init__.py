"""Gateway configuration, model catalog, endpoint option builders and services."""
