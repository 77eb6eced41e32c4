"""Pattern library shared by the triage analyzers.

Single source of truth for secret signatures, forbidden code patterns,
forbidden packages and the markers used by the style and semantic
heuristics. Analyzers import these tables instead of embedding literals.
"""

import re
from typing import NamedTuple, Pattern, Tuple


class SecretSignature(NamedTuple):
    """A named regex tuned to one credential shape."""

    name: str
    pattern: Pattern[str]


SECRET_SIGNATURES: Tuple[SecretSignature, ...] = (
    SecretSignature(
        "generic API key",
        re.compile(r"(?:api[_-]?key|apikey)['\":\s]*['\"]?[a-zA-Z0-9_-]{20,}", re.IGNORECASE),
    ),
    SecretSignature(
        "generic password",
        re.compile(r"(?:password|passwd|pwd)['\":\s]*['\"]?[^\s'\"]{8,}", re.IGNORECASE),
    ),
    SecretSignature(
        "generic secret or token",
        re.compile(r"(?:secret|token)['\":\s]*['\"]?[a-zA-Z0-9_-]{20,}", re.IGNORECASE),
    ),
    SecretSignature(
        "private key header",
        re.compile(r"-----BEGIN (?:RSA |DSA |EC )?PRIVATE KEY-----"),
    ),
    SecretSignature(
        "personal access token",
        re.compile(r"ghp_[a-zA-Z0-9]{36}"),
    ),
    SecretSignature(
        "platform API key",
        re.compile(r"sk-[a-zA-Z0-9]{48}"),
    ),
    SecretSignature(
        "cloud access key id",
        re.compile(r"AKIA[0-9A-Z]{16}"),
    ),
)

# Semantic analyzer defaults, matched case-insensitively
DEFAULT_FORBIDDEN_PATTERNS: Tuple[str, ...] = (
    r": any",          # type escape hatch annotation
    r"as any",         # type escape hatch assertion
    r"eval\(",         # dynamic code execution
    r"Function\(",     # dynamic code execution
    r"TODO.*HACK",     # hack comments
    r"FIXME.*later",   # deferred fixes
)

DEFAULT_FORBIDDEN_PACKAGES: Tuple[str, ...] = (
    "event-stream",    # supply chain compromise
    "flatmap-stream",  # malicious payload
    "mailparser",      # vulnerable legacy releases
)

# Nesting heuristic markers
BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"

# Quoted module references: from '...', import '...', require('...'), import('...')
MODULE_REFERENCE_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"\bfrom\s+['\"]([^'\"]+)['\"]"),
    re.compile(r"^\s*import\s+['\"]([^'\"]+)['\"]"),
    re.compile(r"\brequire\(\s*['\"]([^'\"]+)['\"]\s*\)"),
    re.compile(r"\bimport\(\s*['\"]([^'\"]+)['\"]\s*\)"),
)
RELATIVE_MODULE_PREFIX = "."
MODULE_PATH_SEPARATOR = "/"
# Two separate capital letters, e.g. "ReactHelperUtils"
PACKAGE_LIKE_CAPITALS = re.compile(r"[A-Z].*[A-Z]")

# Style checker
SOURCE_EXTENSIONS: Tuple[str, ...] = (".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs")
TEST_FILE_MARKERS: Tuple[str, ...] = (".test.", ".spec.")
MAX_LINE_LENGTH = 120
DEBUG_OUTPUT_PATTERN = re.compile(r"console\.(?:log|debug)")
LEGACY_VAR_PATTERN = re.compile(r"\bvar\s+")

# Dependency manifest
DEFAULT_MANIFEST = "package.json"
MANIFEST_DEPENDENCY_KEYS: Tuple[str, ...] = ("dependencies", "devDependencies")
