"""Spanish fuel station prices: fetch, cache, geofilter and sort."""

__version__ = "0.1.0"
