"""Tests for RecordingCanvas command capture."""

from shapekit.canvas import RecordingCanvas
from shapekit.model import Action, Point


class TestRecordingCanvas:
    def test_records_commands_in_user_space(self, canvas):
        canvas.translate((10, 10))
        canvas.move_to((1, 2))
        assert canvas.commands == [
            ("translate", Point(10.0, 10.0)),
            ("move_to", Point(1.0, 2.0)),
        ]

    def test_arc_recorded_once(self, canvas):
        canvas.arc((0, 0), 1.0, 0.0, 1.0)
        assert canvas.command_names() == ["arc"]

    def test_line_records_its_steps(self, canvas):
        canvas.line((0, 0), (1, 0), "stroke")
        assert canvas.command_names() == [
            "new_path", "move_to", "line_to", "perform_action",
        ]
        assert list(canvas.iter_commands("perform_action")) == [(Action.STROKE,)]

    def test_consuming_action_clears_path_without_new_path_command(self, canvas):
        canvas.move_to((0, 0))
        canvas.line_to((1, 1))
        canvas.perform_action("fill")
        assert canvas.command_names() == ["move_to", "line_to", "perform_action"]
        assert canvas.current_point is None
        assert len(canvas.current_path().vertices) == 0

    def test_painted_vertices(self):
        c = RecordingCanvas()
        c.poly([(0, 0), (2, 0), (2, 2)], "fill", close=True)
        assert c.painted[0].vertices.shape == (4, 2)
