"""Comment import transform: turns ``/* @mpx-import "a.css" */`` into ``@import``.

Minifiers that strip at-rules usually keep comments, so a stylesheet can carry
a "soft" import that only this pipeline turns into a real one.
"""

from __future__ import annotations

import logging
import re

from atimport.stylesheet.model import AtRule, Comment, Root

logger = logging.getLogger("atimport.transforms")

# e.g. ` @mpx-import "xxx"`
COMMENT_IMPORT_RE = re.compile(r"^(@mpx-import\s+)")
_QUOTED_RE = re.compile(r"""(["'].+["'])""")


class CommentImportTransform:
    """Replace every marker comment with an equivalent ``@import`` rule.

    The new rule is inserted right before the comment and takes over its
    source position; the comment is then removed. Marker comments without a
    quoted URL are left alone.
    """

    def apply(self, root: Root) -> Root:
        root.walk_comments(self._rewrite)
        return root

    @staticmethod
    def _rewrite(comment: Comment) -> None:
        text = comment.text
        if not COMMENT_IMPORT_RE.match(text):
            return
        matched = _QUOTED_RE.search(COMMENT_IMPORT_RE.sub("", text, count=1))
        if not matched:
            return
        at_rule = AtRule("import", matched.group(1), line=comment.line, column=comment.column)
        comment.before(at_rule)
        comment.remove()
        logger.debug("Rewrote comment import %s at line %s", matched.group(1), comment.line)
