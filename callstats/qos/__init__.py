"""QoS sample ingestion."""

from callstats.qos.sample import QoSSample, parse_metric

__all__ = ["QoSSample", "parse_metric"]
