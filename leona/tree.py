from typing import List, Callable, Iterator, Optional, Any


MOVE_DIRECTIONS = ('FORWARD', 'BACKWARD', 'TURN_LEFT', 'TURN_RIGHT')
SINGLE_COMMANDS = ('PEN_UP', 'PEN_DOWN', 'SET_COLOR', 'END')


class Meta:

    empty: bool
    line: int

    def __init__(self, line: Optional[int]=None) -> None:
        self.empty = line is None
        if line is not None:
            self.line = line


class Tree:
    """The base class of every parse tree node.

    Stores "data" and "children" in attributes of the same name.
    Trees can be hashed and compared.

    Parameters:
        data: The kind of node ('sequence', 'repeat', 'move' or 'single')
        children: The node's slots, in order. Missing slots are ``None``
        meta: The source line the node was parsed from
    """

    data: str
    children: List[Any]

    def __init__(self, data: str, children: List[Any], meta: Optional[Meta]=None) -> None:
        self.data = data
        self.children = children
        self._meta = meta

    @property
    def meta(self) -> Meta:
        if self._meta is None:
            self._meta = Meta()
        return self._meta

    def __repr__(self):
        return 'Tree(%r, %r)' % (self.data, self.children)

    def _pretty_label(self):
        return self.data

    def _pretty(self, level, indent_str):
        children = [c for c in self.children if c is not None]
        if not any(isinstance(c, Tree) for c in children):
            return [indent_str*level, self._pretty_label(), '\t', ' '.join('%s' % (c,) for c in children), '\n']

        l = [indent_str*level, self._pretty_label(), '\n']
        for n in children:
            if isinstance(n, Tree):
                l += n._pretty(level+1, indent_str)
            else:
                l += [indent_str*(level+1), '%s' % (n,), '\n']

        return l

    def pretty(self, indent_str: str='  ') -> str:
        """Returns an indented string representation of the tree.

        Great for debugging.
        """
        return ''.join(self._pretty(0, indent_str))

    def __eq__(self, other):
        try:
            return self.data == other.data and self.children == other.children
        except AttributeError:
            return False

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self) -> int:
        return hash((self.data, tuple(self.children)))

    def iter_subtrees_topdown(self) -> 'Iterator[Tree]':
        """Depth-first iteration, in the order pretty() prints the nodes."""
        stack = [self]
        while stack:
            node = stack.pop()
            if not isinstance(node, Tree):
                continue
            yield node
            for n in reversed(node.children):
                stack.append(n)

    def find_pred(self, pred: 'Callable[[Tree], bool]') -> 'Iterator[Tree]':
        """Returns all nodes of the tree that evaluate pred(node) as true."""
        return filter(pred, self.iter_subtrees_topdown())

    def find_data(self, data: str) -> 'Iterator[Tree]':
        """Returns all nodes of the tree whose data equals the given data."""
        return self.find_pred(lambda t: t.data == data)


class Sequence(Tree):
    """Runs ``current``, then whatever ``rest`` represents.

    ``rest`` is ``None`` when the statement is the last one of a quoted loop body.
    """

    def __init__(self, current: Optional[Tree], rest: Optional[Tree], meta: Optional[Meta]=None) -> None:
        super(Sequence, self).__init__('sequence', [current, rest], meta)

    @property
    def current(self) -> Optional[Tree]:
        return self.children[0]

    @property
    def rest(self) -> Optional[Tree]:
        return self.children[1]


class Repeat(Tree):

    def __init__(self, count: int, body: Tree, meta: Optional[Meta]=None) -> None:
        assert count >= 0, count
        super(Repeat, self).__init__('repeat', [count, body], meta)

    @property
    def count(self) -> int:
        return self.children[0]

    @property
    def body(self) -> Tree:
        return self.children[1]


class Move(Tree):

    def __init__(self, direction: str, amount: int, meta: Optional[Meta]=None) -> None:
        assert direction in MOVE_DIRECTIONS, direction
        super(Move, self).__init__('move', [direction, amount], meta)

    @property
    def direction(self) -> str:
        return self.children[0]

    @property
    def amount(self) -> int:
        return self.children[1]


class Single(Tree):
    """A command without a count: pen up, pen down, set color, or the end-marker.

    Colors are stored in uppercase.
    """

    def __init__(self, command: str, color: Optional[str]=None, meta: Optional[Meta]=None) -> None:
        assert command in SINGLE_COMMANDS, command
        assert (color is not None) == (command == 'SET_COLOR'), (command, color)
        if color is not None:
            color = color.upper()
        super(Single, self).__init__('single', [command, color], meta)

    @property
    def command(self) -> str:
        return self.children[0]

    @property
    def color(self) -> Optional[str]:
        return self.children[1]
