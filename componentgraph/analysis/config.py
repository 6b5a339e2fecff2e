"""Analysis configuration - constants and patterns.

This module contains the fixed vocabulary the classifier, import extractor,
linker and state-flow tracer match against.

CRITICAL: This file should contain ONLY configuration constants.
NO business logic. Runtime overrides come from config_runtime.
"""

# =============================================================================
# DECLARATIONS
# =============================================================================

# Keywords that bind an assignable declaration
DECLARATION_KEYWORDS: frozenset[str] = frozenset({"const", "let", "var"})

# Keywords allowed before a state slot destructuring
STATE_DECLARATION_KEYWORDS: frozenset[str] = frozenset({"const", "let"})

# Base classes that make an uppercase class a component
COMPONENT_BASE_CLASSES: frozenset[str] = frozenset({"Component", "PureComponent"})

# Namespace a base class or state initializer may be qualified with
FRAMEWORK_NAMESPACE = "React"

# Prefix that marks a hook-style function (followed by an uppercase letter)
HOOK_PREFIX = "use"

# =============================================================================
# FEATURE FLAGS
# =============================================================================

# Calls that declare a [value, setValue] state slot
STATE_INITIALIZERS: frozenset[str] = frozenset({"useState"})

# Calls that register an effect lifecycle callback
EFFECT_REGISTRARS: frozenset[str] = frozenset({"useEffect"})

# Conventional name of the external parameter object
EXTERNAL_PARAMETER_NAME = "props"

# =============================================================================
# IMPORTS AND PARAMETERS
# =============================================================================

# Import specifiers that point inside the project (relative or root alias)
LOCAL_IMPORT_PREFIXES: tuple[str, ...] = (".", "@/")

# Structural/presentational attributes never reported as passed parameters
IGNORED_PARAMETERS: frozenset[str] = frozenset({
    "key",
    "ref",
    "className",
    "class",
    "style",
    "children",
})

# Tokens scanned past when skipping a type annotation before giving up
MAX_ANNOTATION_TOKENS = 64
