"""Catalog ingestion processors.

Discovers accounts in an AWS Organization via the Organizations API,
follows pagination to the end, and maps each account into a normalized
catalog Component entity handed back to the host pipeline.
"""
