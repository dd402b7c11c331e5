"""tslog -- a personal stopwatch timestamp logger.

Records named timestamps to a flat CSV file and reports them with
since-previous, since-first and since-now diff columns.
"""

__version__ = "0.8.0"
