"""
Default settings for type generation.

Every value here can be overridden per call or from the command line.
"""

DEFAULT_ROOT_TYPE_NAME = "Root"
DEFAULT_FORMAT = "typescript"

# Suffix used for generated nested type names, e.g. RootNested, RootNested0
NESTED_SUFFIX = "Nested"

# Analysis recurses once per nesting level; keep well below the interpreter's recursion limit
DEFAULT_MAX_DEPTH = 100

# Raw text larger than this is rejected before parsing (1MB)
DEFAULT_MAX_INPUT_KB = 1024

# Number of samples read from a file when inferring a schema
DEFAULT_SAMPLE_SIZE = 1000
