import numpy as np
import pytest

from tesseract.geometry import (
    hamming_distance,
    project_vertex,
    project_vertices,
    rotate_x,
    rotate_y,
    tesseract_edges,
    tesseract_vertices,
)


def test_vertices_are_sixteen_distinct_sign_vectors():
    vertices = tesseract_vertices()

    assert vertices.shape == (16, 4)
    assert set(np.unique(vertices)) == {-1.0, 1.0}
    assert len({tuple(v) for v in vertices}) == 16


def test_vertex_index_bits_select_coordinate_signs():
    vertices = tesseract_vertices()

    assert tuple(vertices[0]) == (-1, -1, -1, -1)
    assert tuple(vertices[5]) == (1, -1, 1, -1)
    assert tuple(vertices[8]) == (-1, -1, -1, 1)
    assert tuple(vertices[15]) == (1, 1, 1, 1)


def test_thirty_two_edges_each_differing_in_one_coordinate():
    vertices = tesseract_vertices()
    edges = tesseract_edges(vertices)

    assert len(edges) == 32
    for i, j in edges:
        assert i < j
        assert hamming_distance(vertices[i], vertices[j]) == 1


def test_edges_cover_every_unit_distance_pair_and_nothing_else():
    vertices = tesseract_vertices()
    edges = set(tesseract_edges(vertices))

    for i in range(16):
        for j in range(i + 1, 16):
            connected = (i, j) in edges
            assert connected == (hamming_distance(vertices[i], vertices[j]) == 1)

    assert (0, 15) not in edges
    assert hamming_distance(vertices[0], vertices[15]) == 4


def test_every_vertex_has_degree_four():
    degree = [0] * 16
    for i, j in tesseract_edges():
        degree[i] += 1
        degree[j] += 1
    assert degree == [4] * 16


def test_project_inner_and_outer_corners():
    vertices = tesseract_vertices()

    np.testing.assert_allclose(project_vertex(vertices[0]), [-1 / 3, -1 / 3, -1 / 3])
    np.testing.assert_allclose(project_vertex(vertices[15]), [1, 1, 1])


def test_projection_is_deterministic():
    vertex = tesseract_vertices()[6]

    first = project_vertex(vertex)
    second = project_vertex(vertex)

    assert np.array_equal(first, second)


def test_project_vertices_matches_single_projection():
    vertices = tesseract_vertices()
    projected = project_vertices(vertices)

    assert projected.shape == (16, 3)
    for vertex, point in zip(vertices, projected):
        np.testing.assert_allclose(point, project_vertex(vertex))


def test_projection_rejects_singular_distance():
    vertices = tesseract_vertices()

    with pytest.raises(ValueError):
        project_vertex(vertices[15], distance=1.0)
    with pytest.raises(ValueError):
        project_vertices(vertices, distance=-1.0)


def test_rotations_turn_axes_a_quarter():
    point = np.array([[0.0, 1.0, 0.0]])
    np.testing.assert_allclose(rotate_x(point, np.pi / 2), [[0, 0, 1]], atol=1e-12)

    point = np.array([[0.0, 0.0, 1.0]])
    np.testing.assert_allclose(rotate_y(point, np.pi / 2), [[1, 0, 0]], atol=1e-12)
