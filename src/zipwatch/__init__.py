"""zipwatch: ZIP-code hazard lookup over NOAA, USGS and FEMA data."""

__version__ = "0.1.0"
