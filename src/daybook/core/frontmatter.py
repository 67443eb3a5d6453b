"""Pure frontmatter detection - no I/O dependencies."""

FRONTMATTER_DELIMITER = "---"


def skip_frontmatter(lines: list[str]) -> int:
    """
    Index of the first line after a leading frontmatter block.

    Returns 0 when the document does not open with ``---``. An unclosed
    block runs to the end of the document, so the result is ``len(lines)``.
    Interior content is not validated.
    """
    if not lines or lines[0] != FRONTMATTER_DELIMITER:
        return 0

    for i in range(1, len(lines)):
        if lines[i] == FRONTMATTER_DELIMITER:
            return i + 1
    return len(lines)
