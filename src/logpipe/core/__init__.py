"""Core pipeline: levels, records, encoders and handlers."""
