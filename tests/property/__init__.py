"""Property-based tests for graphload validation invariants."""
