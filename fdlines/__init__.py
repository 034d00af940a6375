"""Line-by-line reading of bytes from file descriptors with carry-over buffering."""

__version__ = "1.0.0"
__all__ = ["reader", "multi"]