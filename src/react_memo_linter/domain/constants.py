"""
React Memo Linter: Engine Constants
"""

# ANSI Cyan (\033[36m)
_CYAN: str = "\033[36m"
_RESET: str = "\033[0m"
_MEMO_ART: str = r"""
  ___  ___ __  __  ___    _    _ _  _ _____
 | _ \| __|  \/  |/ _ \  | |  | | \| |_   _|
 |   /| _|| |\/| | (_) | | |__| | .` | | |
 |_|_\|___|_|  |_|\___/  |____|_|_|\_| |_|
"""
MEMO_BANNER = _CYAN + _MEMO_ART + _RESET

REGISTRY_PREFIX: str = "react-memo."

CALLBACK_HELPER: str = "useCallback"
MEMO_HELPER: str = "useMemo"
DEFAULT_HOOK_MODULE: str = "react"

DEFAULT_STATEFUL_PRIMITIVES: tuple[str, ...] = (
    "useState",
    "useEffect",
    "useCallback",
    "useMemo",
    "useRef",
    "useContext",
    "useReducer",
    "useLayoutEffect",
)

DEFAULT_DIAGNOSTIC_SINKS: tuple[str, ...] = ("console",)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".js", ".jsx", ".mjs", ".cjs", ".ts", ".mts", ".cts", ".tsx")

DEFAULT_EXCLUDED_DIRS: tuple[str, ...] = ("node_modules", "dist", "build", ".git")

# ESLint applies at most 10 fix passes per file; keep the same ceiling.
DEFAULT_MAX_FIX_PASSES: int = 10

SEVERITY_ERROR: str = "error"
SEVERITY_WARN: str = "warn"
SEVERITY_OFF: str = "off"
SEVERITIES: frozenset[str] = frozenset({SEVERITY_ERROR, SEVERITY_WARN, SEVERITY_OFF})

# Function-like node types visited by both rules (tree-sitter names).
# "function" is what older javascript grammars call a function expression.
FUNCTION_SELECTOR: str = (
    "function_declaration, generator_function_declaration, "
    "function_expression, function, generator_function, arrow_function"
)
