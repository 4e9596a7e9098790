"""BillBridge - move bill attachments from an ERP into an accounting API."""

__version__ = "0.1.0"
