from abc import ABC
from typing import TypeVar, Generic

from .tree import Tree
from .exceptions import VisitError

_Return_T = TypeVar('_Return_T')


class Interpreter(ABC, Generic[_Return_T]):
    """Interpreter walks the tree starting at the root.

    For each tree node, it calls its methods (provided by user via inheritance) according to ``tree.data``.

    The interpreter doesn't automatically visit a node's sub-branches.
    The user has to explicitly call ``visit`` on them, which allows branching and loops.
    Nodes without a matching method are passed to ``__default__``, which raises ``VisitError``.
    """

    def visit(self, tree: Tree) -> _Return_T:
        return self._visit_tree(tree)

    def _visit_tree(self, tree: Tree):
        # Only methods added by subclasses are handlers
        f = None
        if not tree.data.startswith('_') and not hasattr(Interpreter, tree.data):
            f = getattr(type(self), tree.data, None)
        if f is None:
            return self.__default__(tree)
        return f(self, tree)

    def __default__(self, tree):
        raise VisitError(tree.data, tree)
