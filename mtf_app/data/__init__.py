"""
Data ingestion module.

Bar model, raw payload parsing and series validation for the price data
supplied by market data feeds.
"""
