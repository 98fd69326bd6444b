"""
Extracts the list content from a generative-AI response.

Keeps bolded header lines and ``*`` bullet lines, in their original
order, and drops preamble prose, blank lines and trailing commentary
such as ``**Remember:** ...`` notes.  The result is markdown that a
renderer can display line for line.

Usage::

    from extraction import extract_lists

    extract_lists("Sure!\\n**Names**:\\n* Leafy Luxe\\n* Verdant Vibe")
    # '**Names**:\\n* Leafy Luxe\\n* Verdant Vibe'
"""

from typing import List, Sequence

from .classifier import classify_lines
from .models import ClassifiedLine, TerminatorPolicy


def extract_lists(
    raw_text: str,
    policy: TerminatorPolicy = TerminatorPolicy.SKIP_LINE,
) -> str:
    """
    Return only the header and list-item lines of *raw_text*.

    Each retained line is emitted unchanged (list items keep their
    indentation) followed by a newline; the joined result is stripped
    of leading and trailing whitespace.  Any string is accepted and an
    empty result means no list content was found.

    Args:
        raw_text: Full model response.
        policy:   How terminator lines affect the remaining input.
    """
    if not raw_text:
        return ""

    retained = [
        cl.text + "\n" for cl in classify_lines(raw_text, policy) if cl.retained
    ]
    return "".join(retained).strip()


class ListExtractor:
    """
    Stateless extractor bound to a terminator policy.

    Safe to share between threads: nothing is kept between calls.
    """

    def __init__(self, policy: TerminatorPolicy = TerminatorPolicy.SKIP_LINE):
        self.policy = policy

    def extract(self, raw_text: str) -> str:
        return extract_lists(raw_text, self.policy)

    def classify(self, raw_text: str) -> List[ClassifiedLine]:
        return classify_lines(raw_text, self.policy)

    def __repr__(self) -> str:
        return f"ListExtractor(policy={self.policy.name})"


# -----------------------------------------------------------------
# Debug preview
# -----------------------------------------------------------------


def preview_lines(lines: Sequence[ClassifiedLine]) -> str:
    """
    Format classified lines for review.

    Example output::

        [OTHER     ] #0 "Here are some names:"
        [HEADER    ] #1 "**Names**:"  (keep)
        [LIST_ITEM ] #2 "* Leafy Luxe"  (keep)
        [TERMINATOR] #3 "**Remember:** pick one"
    """
    width = max((len(cl.kind.name) for cl in lines), default=0)
    out: List[str] = []

    for cl in lines:
        keep = "  (keep)" if cl.retained else ""
        preview = cl.text[:80]
        out.append(f'[{cl.kind.name:<{width}}] #{cl.index} "{preview}"{keep}')

    return "\n".join(out)
