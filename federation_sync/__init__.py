"""Federation sync service: mirrors local avatar and typing activity onto a Matrix federation."""

__version__ = "1.0.0"
