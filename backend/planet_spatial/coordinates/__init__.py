"""Coordinate reference conversions: the Mercator engine and Geodetic."""
