"""Service layer: codec calls that report failures as CodecResult.

Imports domain and config only; never output or the CLI.
"""
