"""
graphload: semantic validation for declarative data-to-graph import jobs.

A job specification describes how rows from one or more sources map onto
graph nodes, relationships and custom queries. graphload checks that the
specification is internally consistent before any pipeline is allowed to run.
"""

__version__ = "0.1.0"
