"""Per-endpoint option builders.

Each module exposes ``build_options(endpoint, conversation, endpoint_type)``;
``agents.build_options`` additionally takes the originating request first.
"""
