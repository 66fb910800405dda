"""Leave Analyzer package.

Feature modules (attendance ingest, monthly reports) sit behind a thin Flask
controller layer; the record normalizer and monthly aggregator in the middle
are pure functions with no I/O.
"""
