"""Key rewriting: prefix stripping, regex filtering and template renaming.

A TransformRule has three useful states:

    - no pattern: every key passes through unchanged
    - pattern only: keys the pattern matches anywhere pass through unchanged,
      the rest are dropped
    - pattern and template: matching keys are replaced by the template,
      expanded with the capture groups of the first match; the rest are dropped

Template references:
    $1, $2, ...     numbered capture groups ($0 is the whole match)
    $name           named capture group, name being the longest run of
                    letters, digits and underscores after the $
    ${name}         same, with explicit delimiting (e.g. ${1}_suffix)
                    (an empty ${} expands to nothing)
    $$              a literal $

References to groups that do not exist, or did not participate in the match,
expand to the empty string.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from s3_bulk_move.core import get_logger
from s3_bulk_move.core.exceptions import InvalidFilterPattern

logger = get_logger(__name__)

_REFERENCE_RE = re.compile(r"\$(?:(\$)|\{([^}]*)\}|([_0-9A-Za-z]+))")
_GROUP_NUMBER_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class TransformRule:
    """A compiled filter pattern and an optional rename template."""

    pattern: Optional[re.Pattern] = None
    template: Optional[str] = None

    @classmethod
    def from_options(
        cls, src_filter: Optional[str] = None, dest_replace: Optional[str] = None
    ) -> "TransformRule":
        """Build a rule from the raw filter and replacement strings.

        Raises:
            InvalidFilterPattern: If src_filter is not a valid regular expression
        """
        if src_filter is None:
            if dest_replace is not None:
                logger.warning(
                    "Replacement template ignored without a filter pattern",
                    template=dest_replace,
                )
            return cls()

        try:
            pattern = re.compile(src_filter)
        except re.error as e:
            raise InvalidFilterPattern(
                f"Invalid filter pattern {src_filter!r}: {e}"
            ) from e

        return cls(pattern=pattern, template=dest_replace)

    @property
    def renames(self) -> bool:
        return self.pattern is not None and self.template is not None


def relative_key(key: str, prefix: Optional[str]) -> str:
    """Strip the listing prefix from the front of a key.

    This is a plain character slice of ``len(prefix)``, not a path operation.
    """
    if not prefix:
        return key
    return key[len(prefix) :]


def _group_value(match: re.Match, name: str) -> str:
    if _GROUP_NUMBER_RE.fullmatch(name):
        index = int(name)
        if index > match.re.groups:
            return ""
        return match.group(index) or ""
    if name not in match.re.groupindex:
        return ""
    return match.group(name) or ""


def expand_template(template: str, match: re.Match) -> str:
    """Expand $-references in ``template`` against the groups of ``match``."""

    def _replace(ref: re.Match) -> str:
        if ref.group(1):
            return "$"
        if ref.group(2) is not None:
            return _group_value(match, ref.group(2))
        return _group_value(match, ref.group(3))

    return _REFERENCE_RE.sub(_replace, template)


def transform_key(
    key: str, size: int, prefix: Optional[str], rule: TransformRule
) -> Optional[Tuple[str, int]]:
    """Apply prefix stripping and the rule to one listed object.

    Args:
        key: Full object key
        size: Object size in bytes, passed through unchanged
        prefix: Listing prefix to strip, or None
        rule: Filter/rename rule

    Returns:
        (output_key, size), or None if the rule drops the object
    """
    relative = relative_key(key, prefix)

    if rule.pattern is None:
        return relative, size

    match = rule.pattern.search(relative)
    if match is None:
        return None

    if rule.template is None:
        return relative, size

    return expand_template(rule.template, match), size
