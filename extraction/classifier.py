"""
Line classification: terminator → header → list item → other.

A single left-to-right pass over the lines of a model response.  The
only state carried between lines is whether we are inside a list and
which header we are under; neither changes how a line is classified.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .markers import is_header, is_list_item, is_terminator
from .models import ClassifiedLine, LineKind, TerminatorPolicy

logger = logging.getLogger(__name__)


def classify_line(line: str) -> LineKind:
    """
    Classify one line of generated text.

    Terminators are checked first, so a line that looks like a header
    but carries a bold label (``**Note:**:``) is a terminator.
    """
    if is_terminator(line):
        return LineKind.TERMINATOR
    if is_header(line):
        return LineKind.HEADER
    if is_list_item(line):
        return LineKind.LIST_ITEM
    return LineKind.OTHER


def classify_lines(
    raw_text: str,
    policy: TerminatorPolicy = TerminatorPolicy.SKIP_LINE,
) -> List[ClassifiedLine]:
    """
    Classify every line of *raw_text*.

    Args:
        raw_text: Full model response, newline-delimited.
        policy:   With ``STOP``, classification ends at the first
                  terminator line (which is still returned).

    Returns:
        ClassifiedLine list in input order.
    """
    classified: List[ClassifiedLine] = []
    in_list = False
    current_header: Optional[str] = None

    for index, line in enumerate(raw_text.split("\n")):
        kind = classify_line(line)

        if kind == LineKind.HEADER:
            current_header = line
            in_list = False
        elif kind == LineKind.LIST_ITEM:
            in_list = True
        elif kind == LineKind.OTHER:
            in_list = False

        classified.append(
            ClassifiedLine(
                text=line,
                kind=kind,
                index=index,
                in_list=in_list,
                header=current_header,
            )
        )

        if kind == LineKind.TERMINATOR and policy == TerminatorPolicy.STOP:
            logger.debug("Terminator on line %d, stopping: %r", index, line[:60])
            break

    return classified


def group_by_header(
    lines: Sequence[ClassifiedLine],
) -> List[Tuple[Optional[str], List[str]]]:
    """
    Group list items under the header that precedes them.

    Items seen before any header are grouped under ``None``.  A header
    with no items still gets an (empty) group.

    Returns:
        ``[(header, [item, ...]), ...]`` in input order.
    """
    groups: List[Tuple[Optional[str], List[str]]] = []

    for cl in lines:
        if cl.kind == LineKind.HEADER:
            groups.append((cl.text, []))
        elif cl.kind == LineKind.LIST_ITEM:
            if not groups or groups[-1][0] != cl.header:
                groups.append((cl.header, []))
            groups[-1][1].append(cl.text)

    return groups
