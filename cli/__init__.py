"""
Outpost CLI - Helm values encoding

Commands:
- outpost encode - Encode a JSON/YAML document with null omission
- outpost functions - List provider functions
- outpost version - Show version information
"""

__version__ = "0.1.0"
