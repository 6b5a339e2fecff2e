"""Centralized constants for the componentgraph utils package.

Single source of truth for artifact names and environment variable names.
"""

# ============================================================================
# PROJECT ARTIFACTS
# ============================================================================

# Per-project directory under the analysed ROOT (config, error log)
STATE_DIR_NAME = ".cgraph"

CONFIG_FILE_NAME = "config.json"
ERROR_LOG_NAME = "error.log"

# ============================================================================
# ENVIRONMENT VARIABLES
# ============================================================================

# Prefix for COMPONENTGRAPH_<SECTION>_<KEY> overrides
ENV_PREFIX = "COMPONENTGRAPH"
