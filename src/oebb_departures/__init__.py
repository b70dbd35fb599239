"""ÖBB departures proxy: next direct trains between St. Pölten and Linz."""

__version__ = "1.0.0"
