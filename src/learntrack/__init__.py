"""LearnTrack - In-memory course management with range-partitioned identifiers."""

__version__ = "0.1.0"
