"""Adapters connecting the pipeline to streams and the stdlib logging module."""
