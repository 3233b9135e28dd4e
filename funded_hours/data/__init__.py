"""
Record ingestion module.

Converts child records from the presentation layer into Child models and
provides the demonstration roster.
"""
