"""
Signal generation and aggregation module.

Maps typed indicator records to directional trading signals, filters them,
and aggregates the full signal set into the market sentiment summary.
"""
