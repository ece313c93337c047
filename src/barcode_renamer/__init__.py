"""Copy images into a target folder, named after the barcodes they show."""

__version__ = "0.1.0"
