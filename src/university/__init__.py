"""University registry - academic structure with referential-integrity guards."""

__version__ = "0.1.0"
