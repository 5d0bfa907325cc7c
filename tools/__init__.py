# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the MCP host and core/.  It:
#     1. Imports pure functions from core/
#     2. Registers them with a FastMCP server under catalog names
#     3. Logs every call and result to stderr
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT contain greeting or clock logic (that's in core/)
#   - They do NOT read the environment (main.py hands them Settings)
# =============================================================================
