import re

from roadtrip.dijkstra import sample_graph
from roadtrip.visualize import instructions, main, visualize_graph


def test_edge_list_matches_sample_graph():
    text = visualize_graph()
    lines = text.splitlines()
    header = lines.index("Edge List (From, To, Weight):")
    edge_line = lines[header + 2]
    drawn = {tuple(int(n) for n in m) for m in re.findall(r"\((\d+),(\d+),(\d+)\)", edge_line)}
    graph = sample_graph()
    actual = {(u, v, w) for u, edges in enumerate(graph.adjacency) for v, w in edges}
    assert drawn == actual


def test_adjacency_lines_match_sample_graph():
    graph = sample_graph()
    lines = visualize_graph().splitlines()
    for city in range(graph.vertices):
        (line,) = [line for line in lines if line.startswith(f"City {city}:")]
        pairs = [(int(a), int(b)) for a, b in re.findall(r"\((\d+),(\d+)\)", line)]
        assert pairs == graph.adjacency[city]


def test_picture_framing():
    text = visualize_graph()
    lines = text.splitlines()
    assert lines[0] == ""
    assert lines[1] == lines[3] == lines[-1] == "=" * 46
    assert lines[2] == "GRAPH VISUALIZATION (Cities and Travel Times)"
    assert "  |      |    | 5 | (Destination)" in lines


def test_instructions_text():
    lines = instructions().splitlines()
    assert lines[0] == ""
    assert lines[1] == "Instructions for students:"
    assert [line.split(".")[0] for line in lines[2:]] == ["1", "2", "3", "4"]


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == visualize_graph() + instructions()