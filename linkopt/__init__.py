"""Internal linking optimizer: tier classification and page scoring for crawl exports."""

__version__ = "1.0.0"
