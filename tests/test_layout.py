import pytest

from core.edge_style import NEUTRAL_EDGE, PENDING_EDGE, SATISFIED_EDGE
from core.layout import LayoutSettings, compute_layout


def _todo(todo_id, deps=(), status="PENDING"):
    return {"id": todo_id, "title": todo_id, "status": status, "dependencies": list(deps)}


def test_chain_scenario():
    view = compute_layout([_todo("a"), _todo("b", ["a"]), _todo("c", ["b"])])
    assert len(view.nodes) == 3
    assert len(view.edges) == 2
    assert view.levels() == {"a": 0, "b": 1, "c": 2}
    xs = [view.node(i).x for i in ("a", "b", "c")]
    assert xs[0] < xs[1] < xs[2]


def test_default_spacing_matches_board():
    view = compute_layout([_todo("a"), _todo("b"), _todo("c", ["a"])])
    assert view.node("a").position == {"x": 50, "y": 50}
    assert view.node("b").position == {"x": 50, "y": 180}
    assert view.node("c").position == {"x": 330, "y": 50}


def test_same_level_nodes_do_not_overlap():
    settings = LayoutSettings()
    view = compute_layout([_todo(str(i)) for i in range(5)], settings)
    ys = sorted(node.y for node in view.nodes)
    for upper, lower in zip(ys, ys[1:]):
        assert lower - upper >= settings.node_height


def test_order_within_level_follows_input():
    view = compute_layout([_todo("root"), _todo("z", ["root"]), _todo("y", ["root"]), _todo("x", ["root"])])
    column = view.columns()[1]
    assert [node.id for node in column] == ["z", "y", "x"]


def test_nodes_keep_input_order_in_output():
    view = compute_layout([_todo("c", ["b"]), _todo("b", ["a"]), _todo("a")])
    assert [node.id for node in view.nodes] == ["c", "b", "a"]


def test_cycle_scenario_still_lays_out():
    view = compute_layout([_todo("a", ["b"]), _todo("b", ["a"]), _todo("c", ["a"])])
    assert view.levels() == {"a": 0, "b": 0, "c": 1}
    assert view.node("a").in_cycle and view.node("b").in_cycle
    assert not view.node("c").in_cycle
    assert view.node("a").y != view.node("b").y


def test_dangling_reference_keeps_task_at_level_zero():
    view = compute_layout([_todo("a", ["missing"])])
    assert view.edges == ()
    assert view.node("a").level == 0


def test_edges_styled_by_source_status():
    view = compute_layout(
        [
            _todo("done", status="WOVEN"),
            _todo("busy", status="THREADING"),
            _todo("idle"),
            _todo("t", ["done", "busy", "idle"]),
        ]
    )
    styles = {edge.source: edge.style for edge in view.edges}
    assert styles == {"done": SATISFIED_EDGE, "busy": PENDING_EDGE, "idle": NEUTRAL_EDGE}


def test_layout_is_deterministic():
    todos = [_todo("a"), _todo("b", ["a"]), _todo("c", ["a"]), _todo("d", ["b", "c"])]
    assert compute_layout(todos) == compute_layout(todos)
    assert compute_layout(todos).levels()["d"] == 2


def test_custom_settings_move_positions():
    settings = LayoutSettings(node_width=100, horizontal_gap=20, margin=0, node_height=10, vertical_gap=5)
    view = compute_layout([_todo("a"), _todo("b", ["a"]), _todo("c", ["a"])], settings)
    assert view.node("b").position == {"x": 120, "y": 0}
    assert view.node("c").position == {"x": 120, "y": 15}


def test_settings_from_mapping_ignores_bad_values():
    settings = LayoutSettings.from_mapping(
        {"node_width": "240", "node_height": 0, "vertical_gap": "wide", "margin": 0, "colour": "red"}
    )
    assert settings.node_width == 240
    assert settings.node_height == 100
    assert settings.vertical_gap == 30
    assert settings.margin == 0
    assert LayoutSettings.from_mapping(None) == LayoutSettings()


def test_empty_view():
    view = compute_layout([])
    assert view.is_empty
    assert view.columns() == []
    assert view.to_dict() == {"nodes": [], "edges": [], "empty": True}


def test_view_serialization():
    view = compute_layout([_todo("a1234", status="WOVEN"), _todo("b5678", ["a1234"])])
    data = view.to_dict()
    node = data["nodes"][1]
    assert node["id"] == "b5678"
    assert node["label"] == "TODO-5678"
    assert node["level"] == 1
    assert node["status_snapshot"] == "PENDING"
    assert data["edges"][0]["id"] == "a1234-b5678"
    assert data["edges"][0]["style"]["tone"] == "success"


def test_scalar_dependencies_still_render():
    view = compute_layout([{"id": "a", "dependencies": 5}, {"id": "b", "dependencies": True}, {"id": "c", "dependencies": 3.2}])
    assert view.levels() == {"a": 0, "b": 0, "c": 0}
    assert view.edges == ()


@pytest.mark.parametrize("raw", ["nan", float("inf"), "-inf", float("nan")])
def test_settings_from_mapping_ignores_non_finite_values(raw):
    settings = LayoutSettings.from_mapping({"node_width": raw, "margin": raw})
    assert settings.node_width == 200
    assert settings.margin == 50
