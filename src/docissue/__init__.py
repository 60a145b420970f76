"""docissue — registrar document issuance for enrollment and transcript requests."""

__version__ = "0.1.0"
