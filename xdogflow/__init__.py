"""Flow-guided image stylization building blocks: vectors, images, structure tensors, streamlines and settings."""

__version__ = "0.1.0"