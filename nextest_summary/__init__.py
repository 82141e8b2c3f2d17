"""Extract the Summary section from `cargo nextest` human-readable reports."""

__version__ = "0.3.0"
