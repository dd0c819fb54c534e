"""Photoproduction phenomenology: structure functions, helicities, tensors, data sets, plots and chi-squared."""

__version__ = "0.1.0"