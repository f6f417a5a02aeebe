"""Parse and encode message bodies of the JT/T 808 and JT/T 1078 vehicle terminal protocols."""

__version__ = "0.1.0"