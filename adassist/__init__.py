"""Ad Assistant -- keyword lists in, ad copy / analysis / negative keywords out."""

__version__ = "0.1.0"
