"""Supporting services used by the endpoint option stage."""
