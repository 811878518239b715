import os

from pathfinding import config
from pathfinding.graph import to_networkx
from pathfinding.visualize_network import draw_graph_with_path, format_path


def test_format_path():
    assert format_path(['A', 'B', 'C']) == "Path found: A -> B -> C"


def test_format_path_not_found():
    assert format_path(None) == "No path was found"


def test_format_path_custom_separator():
    assert format_path([1, 2], separator=",") == "Path found: 1,2"


def test_draw_graph_with_path(tmp_path, sample_graph):
    output = tmp_path / "plots" / "path.png"
    written = draw_graph_with_path(
        to_networkx(sample_graph), ['A', 'B', 'C', 'D', 'F'], output_link=str(output)
    )
    assert written == str(output)
    assert os.path.getsize(output) > 0


def test_draw_graph_without_path(tmp_path, cycle_graph):
    output = tmp_path / "cycle.png"
    draw_graph_with_path(to_networkx(cycle_graph), None, output_link=str(output), layout="circular")
    assert output.exists()


def test_default_output_is_relative_to_working_directory(tmp_path, monkeypatch, cycle_graph):
    monkeypatch.chdir(tmp_path)
    assert not config.PLOTS_DIR.is_absolute()
    written = draw_graph_with_path(to_networkx(cycle_graph), ['A', 'B'])
    assert (tmp_path / written).exists()
    assert (tmp_path / "plots" / "shortest_path.png").exists()
