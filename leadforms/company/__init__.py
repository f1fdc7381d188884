"""Company-information form module."""
