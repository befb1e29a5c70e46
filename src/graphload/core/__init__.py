"""Core infrastructure: configuration loading, logging, secret references and mapping lookups."""
