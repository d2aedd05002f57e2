"""Browse a directory of images as a paged, shuffleable slideshow over HTTP."""

__version__ = '0.3.0'
