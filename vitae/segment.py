"""
Split a free-text job description into a prose summary and itemized highlights.

This is a simple line scanner, not language understanding. Each line is
stripped and classified:

* a line starting with a bullet marker (``•``, ``-`` or ``*``) is a highlight,
* a line starting with a digit that contains a ``.`` is a numbered highlight
  (everything up to and including the first ``.`` is dropped),
* any other non-empty line is summary text until the first highlight is seen,
  and a highlight of its own after that,
* empty lines are skipped.

Once a highlight has been seen the scanner never returns to summary mode:
trailing prose after a bullet list becomes one more highlight.

>>> split_description('Led the team.\\n• Shipped v2\\n• Cut costs 20%')
('Led the team.', ['Shipped v2', 'Cut costs 20%'])
>>> split_description('• Did X\\nAlso did Y')
(None, ['Did X', 'Also did Y'])
"""

from typing import Optional

BULLET_MARKERS = ('•', '-', '*')


def _numbered_item(line: str) -> Optional[str]:
    if line[:1].isdigit() and '.' in line:
        return line.split('.', 1)[1].strip()
    return None


def split_description(
    description: Optional[str],
) -> tuple[Optional[str], Optional[list[str]]]:
    """Return ``(summary, highlights)`` for a free-text description.

    The summary is the pre-highlight lines joined with single spaces. When no
    line qualifies as either summary or highlight, the description itself is
    returned as the summary, so text is never dropped. ``highlights`` is None
    when no highlight was found.

    >>> split_description('Built tools.\\nMentored juniors.')
    ('Built tools. Mentored juniors.', None)
    >>> split_description(None)
    (None, None)
    """
    if description is None:
        return None, None

    summary_lines: list[str] = []
    highlights: list[str] = []
    in_highlights = False

    for raw_line in description.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith(BULLET_MARKERS):
            highlights.append(line[1:].strip())
            in_highlights = True
        elif (item := _numbered_item(line)) is not None:
            highlights.append(item)
            in_highlights = True
        elif not in_highlights:
            summary_lines.append(line)
        else:
            highlights.append(line)

    if summary_lines:
        summary = ' '.join(summary_lines)
    elif highlights:
        summary = None
    else:
        summary = description or None
    return summary, (highlights or None)
