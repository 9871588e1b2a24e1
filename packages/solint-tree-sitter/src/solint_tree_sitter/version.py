import re

LATEST_VERSION = "0.8.30"

_COMMENT_RE = re.compile(r"//[^\n]*|/\*.*?\*/", re.DOTALL)
_PRAGMA_RE = re.compile(r"\bpragma\s+solidity\s+([^;]*);")
_CONSTRAINT_RE = re.compile(r"(\^|~|>=|<=|>|<|=)?\s*(\d+(?:\.\d+){0,2})")


class LanguageVersionError(ValueError):
    """Raised when a version pragma does not name any usable version"""

    def __init__(self, source_id: str):
        super().__init__(f"Cannot infer Solidity version for source file: {source_id}")
        self.source_id = source_id


def _normalize(version: str) -> tuple[int, int, int]:
    parts = [int(p) for p in version.split(".")]
    while len(parts) < 3:
        parts.append(0)
    return parts[0], parts[1], parts[2]


def infer_language_version(source_id: str, content: str) -> str:
    """Pick the language version to parse ``content`` with.

    Files without a ``pragma solidity`` use the latest known version. Otherwise the
    highest version the first pragma allows is used; exclusive upper bounds (``<``)
    are not candidates.
    """
    match = _PRAGMA_RE.search(_COMMENT_RE.sub("", content))
    if match is None:
        return LATEST_VERSION

    candidates = [
        _normalize(version) for op, version in _CONSTRAINT_RE.findall(match.group(1)) if op != "<"
    ]
    if not candidates:
        raise LanguageVersionError(source_id)

    return ".".join(str(p) for p in max(candidates))
