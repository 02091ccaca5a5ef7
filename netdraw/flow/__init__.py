"""Flow patterns and their classification into congestion bands."""

from .congestion import NUM_BANDS, TOP_BAND, classify, partition_by_band
from .flow_file import FlowSamples, read_flow_samples

__all__ = [
    "NUM_BANDS",
    "TOP_BAND",
    "FlowSamples",
    "classify",
    "partition_by_band",
    "read_flow_samples",
]
