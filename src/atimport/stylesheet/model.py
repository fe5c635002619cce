"""Stylesheet tree: a small mutable node tree over tinycss2 component values.

tinycss2 produces immutable lists of rules and tokens. The import pipeline
needs to navigate siblings, insert rules before comments and remove rules in
place, so each top-level tinycss2 node is wrapped in one of the classes below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

import tinycss2


@dataclass(frozen=True)
class ParseIssue:
    """A tinycss2 parse error found while building the tree."""

    message: str
    line: int | None = None
    column: int | None = None


class Node:
    """Base class for every node in the stylesheet tree."""

    type = "node"

    def __init__(self, line: int | None = None, column: int | None = None) -> None:
        self.parent: Container | None = None
        self.line = line
        self.column = column

    def _position(self) -> int:
        assert self.parent is not None
        for i, sibling in enumerate(self.parent.nodes):
            if sibling is self:
                return i
        raise ValueError("node is not a child of its parent")

    def prev(self) -> Node | None:
        """Return the previous sibling, skipping whitespace."""
        if self.parent is None:
            return None
        siblings = self.parent.nodes
        for i in range(self._position() - 1, -1, -1):
            if not isinstance(siblings[i], Whitespace):
                return siblings[i]
        return None

    def remove(self) -> None:
        """Detach this node from its parent. Removing twice is a no-op."""
        if self.parent is None:
            return
        del self.parent.nodes[self._position()]
        self.parent = None

    def before(self, node: Node) -> None:
        """Insert *node* immediately before this one."""
        if self.parent is None:
            raise ValueError("cannot insert before a detached node")
        node.remove()
        node.parent = self.parent
        self.parent.nodes.insert(self._position(), node)

    def to_css(self) -> str:
        raise NotImplementedError


class Container(Node):
    """A node holding an ordered list of child nodes."""

    def __init__(self, line: int | None = None, column: int | None = None) -> None:
        super().__init__(line, column)
        self.nodes: list[Node] = []

    def append(self, node: Node) -> None:
        node.remove()
        node.parent = self
        self.nodes.append(node)

    def walk(self) -> Iterator[Node]:
        """Yield every descendant depth-first, in document order."""
        for node in list(self.nodes):
            yield node
            if isinstance(node, Container):
                yield from node.walk()

    def walk_comments(self, callback: Callable[["Comment"], None]) -> None:
        """Call *callback* for every comment; the tree may be mutated meanwhile."""
        for node in list(self.walk()):
            if isinstance(node, Comment):
                callback(node)

    def walk_at_rules(self, name: str | None = None) -> list["AtRule"]:
        """Return all at-rules (optionally filtered by lowercase *name*)."""
        return [
            node
            for node in self.walk()
            if isinstance(node, AtRule) and (name is None or node.name.lower() == name)
        ]

    def _children_css(self) -> str:
        return "".join(child.to_css() for child in self.nodes)


class Root(Container):
    """The stylesheet itself."""

    type = "root"

    def __init__(self, path: str | None = None) -> None:
        super().__init__(1, 1)
        self.path = path
        self.parse_errors: list[ParseIssue] = []

    def to_css(self) -> str:
        return self._children_css()


class AtRule(Container):
    """An at-rule such as ``@import "a.css" screen;``.

    ``prelude`` holds the tinycss2 tokens between the at-keyword and the
    semicolon or block. Conditional group rules (``@media`` and friends) get
    parsed children in ``nodes``; any other block is kept verbatim in
    ``content`` and ``nodes`` is ``None``.
    """

    type = "at-rule"

    def __init__(
        self,
        name: str,
        params: str | None = None,
        *,
        prelude: list | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(line, column)
        self.name = name
        if prelude is None:
            prelude = tinycss2.parse_component_value_list(f" {params}" if params else "")
        self.prelude: list = prelude
        self.nodes: list[Node] | None = None  # type: ignore[assignment]
        self.content: list | None = None

    @property
    def has_block(self) -> bool:
        return self.nodes is not None or self.content is not None

    @property
    def after_name_comments(self) -> list:
        """Comment tokens between the at-keyword and the first parameter."""
        comments = []
        for token in self.prelude:
            if token.type == "comment":
                comments.append(token)
            elif token.type != "whitespace":
                break
        return comments

    @property
    def params(self) -> str:
        """Parameter text with comments dropped."""
        return tinycss2.serialize([t for t in self.prelude if t.type != "comment"]).strip()

    def append(self, node: Node) -> None:
        if self.nodes is None:
            self.nodes = []
        super().append(node)

    def walk(self) -> Iterator[Node]:
        if self.nodes is None:
            return iter(())
        return super().walk()

    def to_css(self) -> str:
        head = f"@{self.name}{tinycss2.serialize(self.prelude)}"
        if self.nodes is not None:
            return f"{head}{{{self._children_css()}}}"
        if self.content is not None:
            return f"{head}{{{tinycss2.serialize(self.content)}}}"
        return f"{head};"

    def __repr__(self) -> str:
        return f"<AtRule @{self.name} {self.params!r}>"


class Comment(Node):
    """A ``/* ... */`` comment. ``text`` is the trimmed inner text."""

    type = "comment"

    def __init__(self, value: str, line: int | None = None, column: int | None = None) -> None:
        super().__init__(line, column)
        self.value = value

    @property
    def text(self) -> str:
        return self.value.strip()

    def to_css(self) -> str:
        return f"/*{self.value}*/"

    def __repr__(self) -> str:
        return f"<Comment {self.text!r}>"


class Whitespace(Node):
    type = "whitespace"

    def __init__(self, value: str, line: int | None = None, column: int | None = None) -> None:
        super().__init__(line, column)
        self.value = value

    def to_css(self) -> str:
        return self.value


class Raw(Node):
    """Any other tinycss2 node (qualified rules), serialized verbatim."""

    type = "raw"

    def __init__(self, node, line: int | None = None, column: int | None = None) -> None:
        super().__init__(line, column)
        self.node = node

    def to_css(self) -> str:
        return self.node.serialize()
