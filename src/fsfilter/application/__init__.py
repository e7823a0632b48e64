"""Application layer: presentation of filters."""
