"""Request processing pipelines."""
