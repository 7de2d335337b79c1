import pytest

from sumkit.colors import BLUE, GREEN, RED, WHITE
from sumkit.matrix import Matrix4
from sumkit.simpledraw import SimpleDraw
from sumkit.vector import Vector3, distance


def _draw():
    return SimpleDraw(10000)


def test_add_line_records_two_vertices():
    draw = _draw()
    draw.add_line(Vector3(1, 2, 3), Vector3(4, 5, 6), RED)
    lines = draw.line_vertices
    assert [v.position for v in lines] == [Vector3(1, 2, 3), Vector3(4, 5, 6)]
    assert all(v.color == RED for v in lines)


def test_line_capacity_drops_whole_lines():
    draw = SimpleDraw(3)
    draw.add_line(Vector3(), Vector3(1, 0, 0), RED)
    draw.add_line(Vector3(), Vector3(0, 1, 0), RED)
    assert len(draw.line_vertices) == 2


def test_face_capacity_drops_whole_faces():
    draw = SimpleDraw(5)
    draw.add_face(Vector3(), Vector3(1, 0, 0), Vector3(0, 1, 0), RED)
    draw.add_face(Vector3(), Vector3(1, 0, 0), Vector3(0, 1, 0), RED)
    assert len(draw.face_vertices) == 3


def test_lines_and_faces_have_separate_capacity():
    draw = SimpleDraw(3)
    draw.add_face(Vector3(), Vector3(1, 0, 0), Vector3(0, 1, 0), RED)
    draw.add_line(Vector3(), Vector3(1, 0, 0), RED)
    assert len(draw.face_vertices) == 3
    assert len(draw.line_vertices) == 2


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        SimpleDraw(-1)


def test_aabb_has_twelve_edges_on_corners():
    draw = _draw()
    draw.add_aabb(Vector3(0, 0, 0), Vector3(1, 2, 3), WHITE)
    lines = draw.line_vertices
    assert len(lines) == 24
    for v in lines:
        assert v.position.x in (0, 1)
        assert v.position.y in (0, 2)
        assert v.position.z in (0, 3)


def test_aabb_accepts_tuples():
    draw = _draw()
    draw.add_aabb((0, 0, 0), (1, 1, 1), WHITE)
    assert len(draw.line_vertices) == 24


def test_filled_aabb_has_twelve_triangles():
    draw = _draw()
    draw.add_filled_aabb(Vector3(-1, -1, -1), Vector3(1, 1, 1), WHITE)
    faces = draw.face_vertices
    assert len(faces) == 36
    assert all(abs(c) == 1 for v in faces for c in v.position)


def test_sphere_points_lie_on_sphere():
    draw = _draw()
    centre = Vector3(5, 0, -2)
    draw.add_sphere(8, 6, 2.0, centre, WHITE)
    lines = draw.line_vertices
    assert len(lines) == 8 * 6 * 4
    for v in lines:
        assert distance(v.position, centre) == pytest.approx(2.0)


def test_filled_sphere_points_lie_on_sphere():
    draw = _draw()
    centre = Vector3(1, 1, 1)
    draw.add_filled_sphere(6, 4, 3.0, centre, WHITE)
    faces = draw.face_vertices
    assert len(faces) == 6 * 4 * 6
    for v in faces:
        assert distance(v.position, centre) == pytest.approx(3.0)


def test_ground_circle_is_flat_and_round():
    draw = _draw()
    centre = Vector3(0, 4, 0)
    draw.add_ground_circle(12, 1.5, centre, WHITE)
    lines = draw.line_vertices
    assert len(lines) == 24
    for v in lines:
        assert v.position.y == pytest.approx(4.0)
        assert distance(v.position, centre) == pytest.approx(1.5)


def test_oval_uses_both_radii():
    draw = _draw()
    draw.add_oval(4, 3, 1.0, 2.0, Vector3(), WHITE)
    lines = draw.line_vertices
    assert len(lines) == 4 * 3 * 4
    radii = {round(distance(v.position, Vector3()), 6) for v in lines}
    assert radii == {1.0, 2.0}


def test_ellipsoid_points_satisfy_equation():
    draw = _draw()
    draw.add_ellipsoid(10, 5, 1.0, 2.0, 3.0, Vector3(), WHITE)
    lines = draw.line_vertices
    assert len(lines) == 10 * 5 * 2
    for v in lines:
        p = v.position
        assert (p.x / 1.0) ** 2 + (p.y / 2.0) ** 2 + (p.z / 3.0) ** 2 == pytest.approx(1.0)


def test_filled_oval_points_satisfy_equation():
    draw = _draw()
    centre = Vector3(1, 2, 3)
    draw.add_filled_oval(6, 4, 2.0, 1.0, 0.5, centre, WHITE)
    faces = draw.face_vertices
    assert len(faces) == 6 * 4 * 6
    for v in faces:
        p = v.position - centre
        assert (p.x / 2.0) ** 2 + (p.y / 1.0) ** 2 + (p.z / 0.5) ** 2 == pytest.approx(1.0)


def test_cone_faces_meet_at_tip():
    draw = _draw()
    tip = Vector3(0, 5, 0)
    draw.add_cone(7, 1.0, Vector3(), tip, WHITE)
    faces = draw.face_vertices
    assert len(faces) == 21
    for i in range(0, len(faces), 3):
        assert faces[i + 1].position == tip
        assert distance(faces[i].position, Vector3()) == pytest.approx(1.0)


@pytest.mark.parametrize("slices, rings", [(0, 4), (4, 0), (-1, 3)])
def test_no_slices_or_rings_draws_nothing(slices, rings):
    draw = _draw()
    draw.add_sphere(slices, rings, 1.0, Vector3(), WHITE)
    draw.add_filled_oval(slices, rings, 1.0, 1.0, 1.0, Vector3(), WHITE)
    assert draw.line_vertices == ()
    assert draw.face_vertices == ()


def test_ground_plane_grid():
    draw = _draw()
    draw.add_ground_plane(4.0, WHITE)
    lines = draw.line_vertices
    assert len(lines) == 5 * 4
    for v in lines:
        assert v.position.y == 0.0
        assert -2.0 <= v.position.x <= 2.0
        assert -2.0 <= v.position.z <= 2.0


def test_transform_gizmo_of_translation():
    draw = _draw()
    draw.add_transform(Matrix4.translation(Vector3(1, 2, 3)))
    lines = draw.line_vertices
    origin = Vector3(1, 2, 3)
    assert [v.position for v in lines] == [
        origin, origin + Vector3.X_AXIS,
        origin, origin + Vector3.Y_AXIS,
        origin, origin + Vector3.Z_AXIS,
    ]
    assert [v.color for v in lines[::2]] == [RED, GREEN, BLUE]


def test_flush_returns_batch_and_clears():
    draw = _draw()
    draw.add_line(Vector3(), Vector3(1, 1, 1), RED)
    draw.add_face(Vector3(), Vector3(1, 0, 0), Vector3(0, 1, 0), BLUE)
    batch = draw.flush()
    assert len(batch.lines) == 2
    assert len(batch.faces) == 3
    assert draw.line_vertices == ()
    assert draw.face_vertices == ()
    assert draw.flush() == ([], [])