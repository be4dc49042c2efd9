"""Application layer: option validation and the scan, filter, group workflow."""
