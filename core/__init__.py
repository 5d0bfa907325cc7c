# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL of the server's own logic: the tool catalog,
# the greeting and clock operations, and runtime settings.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any protocol code.  Every
#   module here is pure Python and can be exercised in a bare REPL or a unit
#   test without starting a server.
# =============================================================================
