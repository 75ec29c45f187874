"""
Outpost values encoder

Encodes dynamically-typed configuration values to YAML, dropping nulls and
containers that become empty once their nulls are gone.
"""

__version__ = "0.1.0"
