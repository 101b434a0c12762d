"""Package name validation following the npm registry naming rules."""

import re
from dataclasses import dataclass, field
from typing import Any, List
from urllib.parse import quote

MAX_NAME_LENGTH = 214

# Names the registry refuses outright
BLACKLISTED_NAMES = ("node_modules", "favicon.ico")

# Node.js built-in modules; publishing under these names is discouraged
CORE_MODULE_NAMES = frozenset([
    "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
    "constants", "crypto", "dgram", "diagnostics_channel", "dns", "domain",
    "events", "fs", "http", "http2", "https", "inspector", "module", "net",
    "os", "path", "perf_hooks", "process", "punycode", "querystring",
    "readline", "repl", "stream", "string_decoder", "sys", "timers", "tls",
    "trace_events", "tty", "url", "util", "v8", "vm", "wasi",
    "worker_threads", "zlib",
])

SCOPED_NAME_PATTERN = re.compile(r"^(?:@([^/]+?)[/])?([^/]+?)$")
SPECIAL_CHARACTERS = re.compile(r"[~'!()*]")


@dataclass
class NameValidation:
    """Outcome of validating a package name."""

    name: Any
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def valid_for_new_packages(self) -> bool:
        return not self.errors and not self.warnings

    @property
    def valid_for_old_packages(self) -> bool:
        return not self.errors

    @property
    def problems(self) -> List[str]:
        """Errors followed by warnings, in the order they were found."""
        return self.errors + self.warnings


def encode_uri_component(value: str) -> str:
    """Percent-encode ``value`` the way JavaScript's ``encodeURIComponent`` does."""
    return quote(value, safe="!~*'()")


def is_url_friendly(value: str) -> bool:
    try:
        return encode_uri_component(value) == value
    except UnicodeEncodeError:
        # Lone surrogates can't be encoded; encodeURIComponent throws on them too
        return False


def validate_package_name(name: Any) -> NameValidation:
    """Check ``name`` against the npm naming rules.

    Errors make a name unusable for any package; warnings only rule it out
    for new packages, which is the case npminit cares about.
    """
    result = NameValidation(name=name)

    if name is None:
        result.errors.append("name cannot be null")
        return result

    if not isinstance(name, str):
        result.errors.append("name must be a string")
        return result

    if not name:
        result.errors.append("name length must be greater than zero")

    if name.startswith("."):
        result.errors.append("name cannot start with a period")

    if name.startswith("_"):
        result.errors.append("name cannot start with an underscore")

    if name.strip() != name:
        result.errors.append("name cannot contain leading or trailing spaces")

    for blacklisted in BLACKLISTED_NAMES:
        if name.lower() == blacklisted:
            result.errors.append(f"{blacklisted} is not a valid package name")

    if name.lower() in CORE_MODULE_NAMES:
        result.warnings.append(f"{name} is a core module name")

    if len(name) > MAX_NAME_LENGTH:
        result.warnings.append(f"name can no longer contain more than {MAX_NAME_LENGTH} characters")

    if name.lower() != name:
        result.warnings.append("name can no longer contain capital letters")

    if SPECIAL_CHARACTERS.search(name.split("/")[-1]):
        result.warnings.append("name can no longer contain special characters (\"~'!()*\")")

    if not is_url_friendly(name):
        match = SCOPED_NAME_PATTERN.match(name)
        if match and match.group(1) is not None:
            scope, package = match.group(1), match.group(2)
            if is_url_friendly(scope) and is_url_friendly(package):
                return result
        result.errors.append("name can only contain URL-friendly characters")

    return result
