"""Command registry, bootstrap and entrypoint."""
