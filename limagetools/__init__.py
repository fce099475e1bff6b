"""In-memory images and matrices, histogram and point operations, Otsu thresholding and binary erosion."""

__version__ = "0.1.0"
__all__ = ["image", "messages", "processing"]