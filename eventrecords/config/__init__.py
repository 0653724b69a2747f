"""Configuration package.

Import `eventrecords.config.environment` before anything else that reads
environment variables.
"""
