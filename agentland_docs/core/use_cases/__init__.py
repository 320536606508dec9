"""Use cases — orchestration consumed by the CLI."""
