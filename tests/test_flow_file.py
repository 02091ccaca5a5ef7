import numpy as np
import pytest

from netdraw.domain.errors import FieldParseError, FlowFileCorruptError
from netdraw.flow.flow_file import read_flow_samples


class TestReadFlowSamples:
    def test_contiguous_iterations_are_accepted(self, write_flows):
        path = write_flows(["1,10", "1,20", "1,30", "2,11", "2,21", "2,31.5"])

        samples = read_flow_samples(path, num_edges=3)

        assert samples.num_iterations == 2
        assert samples.num_edges == 3
        np.testing.assert_array_equal(samples.iteration(1), [10, 20, 30])
        np.testing.assert_array_equal(samples.iteration(2), [11, 21, 31.5])

    def test_comments_and_blank_lines_are_skipped(self, write_flows):
        path = write_flows(["# assignment run 4", "1,1.5", "", "1, 2.5 ", "# done"])

        samples = read_flow_samples(path, num_edges=2)

        np.testing.assert_array_equal(samples.iteration(1), [1.5, 2.5])

    def test_samples_are_read_only(self, write_flows):
        samples = read_flow_samples(write_flows(["1,1"]), num_edges=1)

        with pytest.raises(ValueError):
            samples.flows[0] = 5.0

    def test_skipped_iteration_is_rejected(self, write_flows):
        path = write_flows(["1,10", "1,20", "1,30", "3,11", "3,21", "3,31"])

        with pytest.raises(FlowFileCorruptError):
            read_flow_samples(path, num_edges=3)

    def test_short_iteration_is_rejected(self, write_flows):
        path = write_flows(["1,10", "1,20", "2,11", "2,21", "2,31"])

        with pytest.raises(FlowFileCorruptError) as exc_info:
            read_flow_samples(path, num_edges=3)
        assert exc_info.value.line_number == 4

    def test_short_last_iteration_is_rejected(self, write_flows):
        path = write_flows(["1,10", "1,20", "1,30", "2,11", "2,21"])

        with pytest.raises(FlowFileCorruptError):
            read_flow_samples(path, num_edges=3)

    def test_iteration_going_back_is_rejected(self, write_flows):
        path = write_flows(["1,10", "2,11", "1,12"])

        with pytest.raises(FlowFileCorruptError):
            read_flow_samples(path, num_edges=1)

    @pytest.mark.parametrize("line", ["0,10", "-1,10", "1,-0.5"])
    def test_invalid_first_row_is_rejected(self, write_flows, line):
        with pytest.raises(FlowFileCorruptError):
            read_flow_samples(write_flows([line]), num_edges=1)

    def test_negative_flow_in_later_row_is_rejected(self, write_flows):
        path = write_flows(["1,10", "1,20", "2,11", "2,-21"])

        with pytest.raises(FlowFileCorruptError, match="negative flow"):
            read_flow_samples(path, num_edges=2)

    def test_empty_file_is_rejected(self, write_flows):
        with pytest.raises(FlowFileCorruptError):
            read_flow_samples(write_flows([]), num_edges=2)

    @pytest.mark.parametrize("line", ["1,lots", "1,1_0.5", "1_0,3"])
    def test_malformed_flow(self, write_flows, line):
        with pytest.raises(FieldParseError):
            read_flow_samples(write_flows([line]), num_edges=1)

    def test_iteration_out_of_range(self, write_flows):
        samples = read_flow_samples(write_flows(["1,1"]), num_edges=1)

        with pytest.raises(IndexError):
            samples.iteration(2)
