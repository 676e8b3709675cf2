from datetime import datetime

from algorithms import compute_kruskal
from engine import final_view
from graph import Graph
from ui import graph_png, pdf_report


def test_graph_png_plain_and_final(sample_graph, sample_result):
    assert graph_png(sample_graph).startswith(b"\x89PNG")
    assert graph_png(sample_graph, final_view(sample_result)).startswith(b"\x89PNG")


def test_pdf_report_for_sample(sample_graph, sample_result):
    body = pdf_report(
        sample_graph, sample_result, final_view(sample_result),
        order=sample_graph.node_ids(), generated_at=datetime(2024, 1, 2, 3, 4),
    )
    assert body.startswith(b"%PDF-")
    assert body.rstrip().endswith(b"%%EOF")


def test_pdf_report_for_single_node():
    g = Graph()
    g.create_node("A", 100, 100)
    result = compute_kruskal(["A"], [])
    assert pdf_report(g, result).startswith(b"%PDF-")


def test_pdf_report_survives_dollar_names():
    g = Graph()
    g.create_node("a", 100, 100, name="$x")
    g.create_node("b", 300, 100, name="y$")
    g.create_edge("a", "b", 2)
    result = compute_kruskal(g.node_ids(), g.edge_list())
    assert pdf_report(g, result, final_view(result)).startswith(b"%PDF-")
    assert graph_png(g).startswith(b"\x89PNG")


def test_long_step_tables_span_pages():
    g = Graph()
    for i in range(30):
        g.create_node(f"N{i}", 20 * i, 10 * (i % 5))
    for i in range(29):
        g.create_edge(f"N{i}", f"N{i + 1}", i + 1)
        if i < 28:
            g.create_edge(f"N{i}", f"N{i + 2}", 50 + i)
    result = compute_kruskal(g.node_ids(), g.edge_list())
    assert len(result.steps) > 20
    assert pdf_report(g, result).startswith(b"%PDF-")
