AMD = "amd"
CJS = "cjs"
GLOBALS = "globals"

_CONVENTION_ALIASES = {
    "amd": AMD,
    "define": AMD,
    "define-style": AMD,
    "requirejs": AMD,
    "cjs": CJS,
    "commonjs": CJS,
    "node": CJS,
    "assignment-style": CJS,
    "globals": GLOBALS,
    "global": GLOBALS,
    "global-object-style": GLOBALS,
    "iife": GLOBALS,
    "browser": GLOBALS,
}

_CONVENTION_DESCRIPTIONS = {
    AMD: "define([deps], function (names) { return E; });",
    CJS: "var name = require(path); module.exports = E;",
    GLOBALS: "(function (global, names) { global.E = E; }(this, names));",
}

SUPPORTED_CONVENTIONS = tuple(_CONVENTION_DESCRIPTIONS)


def normalize_convention(convention: str) -> str:
    normalized = convention.strip().lower()
    resolved = _CONVENTION_ALIASES.get(normalized)
    if resolved is None:
        raise ValueError(f"Unsupported convention '{convention}'. Supported: {sorted(SUPPORTED_CONVENTIONS)}")
    return resolved


def aliases_for(convention: str) -> list[str]:
    """Return the accepted alternative names of a canonical convention, sorted."""
    return sorted(alias for alias, target in _CONVENTION_ALIASES.items() if target == convention and alias != target)


def describe_convention(convention: str) -> str:
    return _CONVENTION_DESCRIPTIONS[normalize_convention(convention)]
