"""dkmap: DK-BASIC input-mapping validator."""

__version__ = "0.3.0"
