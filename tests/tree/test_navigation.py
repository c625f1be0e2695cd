"""Tests for path-addressed navigation over the annotated sample game.

Tree shape (paths in brackets)::

    e4 [0]
    ├── e5 [0,0] ── Nf3 [0,0,0] ─┬─ Nc6 [0,0,0,0] ── Bb5 ── a6
    │                            └─ d6 [0,0,0,1] ── d4
    └── c5 [0,1] ─┬─ Nf3 [0,1,0] ── d6
                  └─ c3 [0,1,1] ── d5
"""

import pytest

from movetree.errors import PathNotFound
from movetree.tree.navigation import (
    branch_start_path,
    end_path,
    go_to_path,
    iter_line,
    mainline,
    mainline_path,
    next_branching_path,
    next_path,
    node_at,
    previous_branching_path,
    previous_path,
    sibling_path,
    start_path,
)

MAIN_END = (0, 0, 0, 0, 0, 0)


@pytest.fixture
def root(annotated_state):
    return annotated_state.root


class TestNodeAt:
    def test_root_path(self, root) -> None:
        assert node_at(root, ()) is root

    def test_variation_node(self, root) -> None:
        node = node_at(root, (0, 1))
        assert node.move.san == "c5"
        assert node.comment == "Sicilian"

    def test_annotated_node(self, root) -> None:
        assert node_at(root, (0, 0, 0)).nags == (1,)

    def test_out_of_range_index(self, root) -> None:
        with pytest.raises(PathNotFound) as excinfo:
            node_at(root, (0, 5))
        assert excinfo.value.path == (0, 5)
        assert excinfo.value.depth == 1

    def test_negative_index(self, root) -> None:
        with pytest.raises(PathNotFound):
            node_at(root, (-1,))

    def test_path_through_leaf(self, root) -> None:
        with pytest.raises(PathNotFound):
            node_at(root, (*MAIN_END, 0))

    def test_not_found_is_a_lookup_error(self, root) -> None:
        with pytest.raises(LookupError):
            node_at(root, (3,))


class TestLines:
    def test_mainline(self, root) -> None:
        sans = [node.move.san for node in mainline(root)]
        assert sans == ["e4", "e5", "Nf3", "Nc6", "Bb5", "a6"]

    def test_mainline_path(self, root) -> None:
        assert mainline_path(root) == MAIN_END

    def test_iter_line_includes_root(self, root) -> None:
        nodes = list(iter_line(root, (0, 1, 1)))
        assert nodes[0] is root
        assert [node.move.san for node in nodes[1:]] == ["e4", "c5", "c3"]


class TestBasicMovement:
    def test_start(self) -> None:
        assert start_path() == ()

    def test_next_follows_main_child(self, root) -> None:
        assert next_path(root, ()) == (0,)
        assert next_path(root, (0, 1)) == (0, 1, 0)

    def test_next_at_leaf_is_unchanged(self, root) -> None:
        assert next_path(root, MAIN_END) == MAIN_END
        assert next_path(root, (0, 1, 1, 0)) == (0, 1, 1, 0)

    def test_previous(self) -> None:
        assert previous_path((0, 1, 0)) == (0, 1)
        assert previous_path((0,)) == ()

    def test_previous_at_root_is_unchanged(self) -> None:
        assert previous_path(()) == ()

    def test_end_from_root(self, root) -> None:
        assert end_path(root, ()) == MAIN_END

    def test_end_stays_inside_variation(self, root) -> None:
        assert end_path(root, (0, 1)) == (0, 1, 0, 0)
        assert end_path(root, (0, 1, 1)) == (0, 1, 1, 0)
        assert end_path(root, (0, 0, 0, 1)) == (0, 0, 0, 1, 0)

    def test_end_at_leaf_is_unchanged(self, root) -> None:
        assert end_path(root, MAIN_END) == MAIN_END

    def test_go_to_path_returns_tuple(self, root) -> None:
        assert go_to_path(root, [0, 1, 0]) == (0, 1, 0)

    def test_go_to_invalid_path(self, root) -> None:
        with pytest.raises(PathNotFound):
            go_to_path(root, (0, 2))


class TestVariationMovement:
    def test_branch_start_in_variation(self) -> None:
        assert branch_start_path((0, 1, 0, 0)) == (0, 1)
        assert branch_start_path((0, 1, 1, 0)) == (0, 1, 1)
        assert branch_start_path((0, 0, 0, 1, 0)) == (0, 0, 0, 1)

    def test_branch_start_on_main_line_is_root(self) -> None:
        assert branch_start_path((0, 0, 0)) == ()
        assert branch_start_path(()) == ()

    def test_next_branching_stops_at_node_with_variations(self, root) -> None:
        assert next_branching_path(root, ()) == (0,)
        assert next_branching_path(root, (0,)) == (0, 0, 0)

    def test_next_branching_without_more_variations_goes_to_end(self, root) -> None:
        assert next_branching_path(root, (0, 0, 0)) == MAIN_END

    def test_previous_branching(self, root) -> None:
        assert previous_branching_path(root, MAIN_END) == (0, 0, 0)
        assert previous_branching_path(root, (0, 0, 0)) == (0,)
        assert previous_branching_path(root, (0,)) == ()

    def test_previous_branching_at_root(self, root) -> None:
        assert previous_branching_path(root, ()) == ()

    def test_sibling_forward_and_back(self, root) -> None:
        assert sibling_path(root, (0, 0), 1) == (0, 1)
        assert sibling_path(root, (0, 1), -1) == (0, 0)

    def test_sibling_is_clamped(self, root) -> None:
        assert sibling_path(root, (0, 1), 1) == (0, 1)
        assert sibling_path(root, (0, 0), -1) == (0, 0)
        assert sibling_path(root, (0, 1, 0, 0), 1) == (0, 1, 0, 0)

    def test_root_has_no_siblings(self, root) -> None:
        assert sibling_path(root, (), 1) == ()
