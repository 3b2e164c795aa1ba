from .utils import logger
from .visitors import Interpreter


class Evaluator(Interpreter[None]):
    """Runs a parse tree against a drawing agent.

    Statements are executed in the order they appear in the program.
    """

    def __init__(self, agent):
        self.agent = agent

    def sequence(self, tree):
        # Walk the chain in a loop; long programs would otherwise recurse once per statement
        node = tree
        while node is not None:
            if node.data != 'sequence':
                self.visit(node)
                break
            current, rest = node.children
            assert current is not None or rest is not None, "Sequence node with no statements (line %s)" % getattr(node.meta, 'line', '?')
            if current is not None:
                self.visit(current)
            node = rest

    def repeat(self, tree):
        count, body = tree.children
        for _ in range(count):
            self.visit(body)

    def move(self, tree):
        direction, amount = tree.children
        if direction == 'FORWARD':
            self.agent.move_by(amount)
        elif direction == 'BACKWARD':
            self.agent.move_by(-amount)
        elif direction == 'TURN_LEFT':
            self.agent.rotate_by(amount)
        elif direction == 'TURN_RIGHT':
            self.agent.rotate_by(-amount)
        else:
            assert False, direction

    def single(self, tree):
        command, color = tree.children
        if command == 'PEN_UP':
            self.agent.pen_up()
        elif command == 'PEN_DOWN':
            self.agent.pen_down()
        elif command == 'SET_COLOR':
            self.agent.set_color(color)
        else:
            assert command == 'END', command


def evaluate(tree, agent):
    "Walks the tree once, issuing every command to the agent in program order"
    logger.debug("Evaluating %s tree with %r", tree.data, agent)
    Evaluator(agent).visit(tree)
