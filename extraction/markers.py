"""
Marker strings and line predicates.

Model output uses a small, fixed slice of markdown: bolded headers
ending in a colon, asterisk bullets, and bolded labels such as
``**Remember:**`` that introduce commentary after the lists.
"""

# -----------------------------------------------------------------
# Markers
# -----------------------------------------------------------------

REMEMBER_MARKER = "**Remember:**"

# A bolded label followed by a colon, e.g. "**Note:** ..."
BOLD_LABEL_MARKER = ":**"

TERMINATOR_MARKERS = (REMEMBER_MARKER, BOLD_LABEL_MARKER)

HEADER_PREFIX = "**"
HEADER_SUFFIX = "**:"

BULLET_MARKER = "*"


# -----------------------------------------------------------------
# Predicates
# -----------------------------------------------------------------


def is_terminator(line: str) -> bool:
    """True if *line* contains any terminator marker as a substring."""
    return any(marker in line for marker in TERMINATOR_MARKERS)


def is_header(line: str) -> bool:
    """
    True for ``**Section Name**:`` style lines.

    Checked against the raw line: surrounding whitespace disqualifies
    a header.
    """
    return line.startswith(HEADER_PREFIX) and line.endswith(HEADER_SUFFIX)


def is_list_item(line: str) -> bool:
    """True if the stripped line starts with an asterisk bullet."""
    return line.strip().startswith(BULLET_MARKER)
