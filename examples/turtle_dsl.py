"""
Turtle DSL
==========

Runs Leona programs on Python's turtle, with an interactive prompt.
"""

import turtle

from leona import Leona, Agent, UnexpectedInput


class ScreenTurtle(Agent):
    "Forwards every command to the turtle module"

    def __init__(self):
        turtle.penup()
        turtle.pencolor('#0000FF')

    def move_by(self, distance):
        turtle.forward(distance)

    def rotate_by(self, degrees):
        turtle.left(degrees)

    def pen_up(self):
        turtle.penup()

    def pen_down(self):
        turtle.pendown()

    def set_color(self, color):
        turtle.pencolor(color)


leona = Leona(agent_class=ScreenTurtle)


def main():
    agent = ScreenTurtle()
    while True:
        code = input('> ')
        try:
            leona.run(code, agent)
        except UnexpectedInput as e:
            print(e)
            print(e.get_context(code))

def test():
    text = """
        % a flower
        COLOR #FF0000. DOWN.
        REPEAT 36 "
            REPEAT 4 "FORWARD 100. RIGHT 90."
            RIGHT 10.
        "
    """
    leona.run(text)

if __name__ == '__main__':
    # test()
    main()
