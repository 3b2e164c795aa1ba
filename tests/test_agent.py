from unittest import TestCase, main

from leona import Leona
from leona.agent import Agent, Turtle, Segment, format_segment, DEFAULT_COLOR


class TestTurtle(TestCase):

    def test_initial_state(self):
        turtle = Turtle()
        self.assertEqual((turtle.x, turtle.y, turtle.heading), (0, 0, 0))
        self.assertFalse(turtle.pen_is_down)
        self.assertEqual(turtle.color, '#0000FF')
        self.assertEqual(turtle.color, DEFAULT_COLOR)
        self.assertEqual(turtle.segments, [])

    def test_is_an_agent(self):
        self.assertIsInstance(Turtle(), Agent)
        self.assertRaises(TypeError, Agent)

    def test_move_with_pen_up(self):
        turtle = Leona().run('FORWARD 10.')
        self.assertEqual(turtle.segments, [])
        self.assertAlmostEqual(turtle.x, 10)
        self.assertAlmostEqual(turtle.y, 0)

    def test_move_with_pen_down(self):
        turtle = Leona().run('DOWN. FORWARD 10.')
        self.assertEqual(turtle.segments, [Segment('#0000FF', 0, 0, 10, 0)])

    def test_backward(self):
        turtle = Turtle(pen_is_down=True)
        turtle.move_by(-4)
        self.assertEqual(turtle.segments, [Segment('#0000FF', 0, 0, -4, 0)])

    def test_rotate(self):
        turtle = Turtle()
        turtle.rotate_by(90)
        turtle.rotate_by(-30)
        self.assertEqual(turtle.heading, 60)
        turtle.rotate_by(30)
        turtle.move_by(2)
        self.assertAlmostEqual(turtle.x, 0)
        self.assertAlmostEqual(turtle.y, 2)

    def test_square(self):
        turtle = Leona().run('DOWN. COLOR #FF0000. REPEAT 4 "RIGHT 90. FORWARD 5."')
        self.assertEqual(len(turtle.segments), 4)
        self.assertTrue(all(s.color == '#FF0000' for s in turtle.segments))
        self.assertEqual(turtle.heading % 360, 0)

        expected = [(0, 0, 0, -5), (0, -5, -5, -5), (-5, -5, -5, 0), (-5, 0, 0, 0)]
        for segment, points in zip(turtle.segments, expected):
            for value, point in zip(segment[1:], points):
                self.assertAlmostEqual(value, point)

        self.assertAlmostEqual(turtle.x, 0)
        self.assertAlmostEqual(turtle.y, 0)

    def test_color_and_pen(self):
        turtle = Leona().run('DOWN. COLOR #00ff00. UP.')
        self.assertEqual(turtle.color, '#00FF00')
        self.assertFalse(turtle.pen_is_down)

    def test_color_applies_to_later_moves(self):
        turtle = Leona().run('DOWN. FORWARD 1. COLOR #123abc. FORWARD 1.')
        self.assertEqual([s.color for s in turtle.segments], ['#0000FF', '#123ABC'])

    def test_on_segment(self):
        drawn = []
        turtle = Turtle(on_segment=drawn.append)
        Leona().run('DOWN. FORWARD 3. UP. FORWARD 3. DOWN. BACKWARD 1.', turtle)
        self.assertEqual(drawn, turtle.segments)
        self.assertEqual(drawn, [Segment('#0000FF', 0, 0, 3, 0), Segment('#0000FF', 6, 0, 5, 0)])

    def test_custom_start(self):
        turtle = Turtle(x=1, y=2, heading=180, pen_is_down=True, color='#FFFFFF')
        turtle.move_by(1)
        segment, = turtle.segments
        self.assertEqual(segment.color, '#FFFFFF')
        self.assertAlmostEqual(segment.end_x, 0)
        self.assertAlmostEqual(segment.end_y, 2)

    def test_format_segment(self):
        self.assertEqual(format_segment(Segment('#0000FF', 0, 0, 10, 0)), '#0000FF 0.0 0.0 10.0 0.0')
        self.assertEqual(format_segment(Segment('#FF0000', 1.5, -2, 3, 4.25)), '#FF0000 1.5 -2.0 3.0 4.25')


if __name__ == '__main__':
    main()
