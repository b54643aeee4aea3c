"""Service layer: command-line tooling built on the gateway client."""
