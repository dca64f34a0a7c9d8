"""Contradiction filter core: membership checks, truth table adapter, filter, IO."""
