"""Services for gwa."""
