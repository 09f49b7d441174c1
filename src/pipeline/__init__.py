"""Export and import workflows.

This module wires discovery, the resource model, and exchange formats
into the end-to-end operations used by the SDK and CLI.
"""
