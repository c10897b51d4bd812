"""Staff and project bookkeeping: employees, payments, staff files, translations and a terminal start screen."""

__version__ = "0.1.0"