"""
Resource limits shared by the input adapter, the normalizer and the renderer.
"""

# Container nesting accepted by default.
DEFAULT_MAX_DEPTH = 64

# Upper bound for a configured max_depth; deeper trees would run the YAML
# emitter out of stack.
MAX_DEPTH_LIMIT = 128

# Stacked dynamic wrappers unwrapped before giving up.
MAX_UNWRAP = 32

# Integral numbers with more digits than this are written in scientific form.
MAX_INTEGER_DIGITS = 4000
