import pytest

from netdraw.domain.models import LatLng
from netdraw.flow.congestion import NUM_BANDS, TOP_BAND, classify, partition_by_band
from netdraw.graph.attributes import AttributeKind
from netdraw.graph.load_graph import assign_edge_ids
from netdraw.graph.road_graph import RoadGraph


def make_graph(capacities):
    graph = RoadGraph()
    graph.add_vertex({AttributeKind.LAT_LNG: LatLng(48.0, 9.0)})
    graph.add_vertex({AttributeKind.LAT_LNG: LatLng(48.1, 9.1)})
    for capacity in capacities:
        graph.add_edge(0, 1, {AttributeKind.CAPACITY: capacity})
    assign_edge_ids(graph)
    return graph


class TestClassify:
    @pytest.mark.parametrize(
        "flow, band",
        [(0, 0), (19.9, 0), (20, 1), (45, 2), (60, 3), (99.9, 4)],
    )
    def test_bins_below_capacity(self, flow, band):
        assert classify(flow, 100) == band

    @pytest.mark.parametrize("flow", [100, 140, 1e6])
    def test_over_capacity_is_top_band(self, flow):
        assert classify(flow, 100) == TOP_BAND

    def test_band_is_monotonic_in_flow(self):
        bands = [classify(flow / 4, 37) for flow in range(0, 400)]

        assert bands == sorted(bands)
        assert bands[0] == 0
        assert bands[-1] == TOP_BAND

    def test_non_positive_capacity(self):
        with pytest.raises(ValueError):
            classify(10, 0)


class TestPartitionByBand:
    def test_edges_are_grouped_in_edge_order(self):
        graph = make_graph([100, 100, 100, 100, 10])
        flows = [150.0, 10.0, 150.0, 50.0, 0.0]

        levels = partition_by_band(graph, flows)

        assert len(levels) == NUM_BANDS
        assert levels[0] == [(0, 1), (0, 4)]
        assert levels[2] == [(0, 3)]
        assert levels[TOP_BAND] == [(0, 0), (0, 2)]

    def test_flows_are_indexed_by_edge_id(self):
        graph = make_graph([100, 100])
        graph.set_edge_id(0, 1)
        graph.set_edge_id(1, 0)

        levels = partition_by_band(graph, [100.0, 0.0])

        assert levels[0] == [(0, 0)]
        assert levels[TOP_BAND] == [(0, 1)]
