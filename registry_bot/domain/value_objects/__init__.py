from .tax_id import TAX_ID_PATTERN, is_valid_tax_id

__all__ = ["TAX_ID_PATTERN", "is_valid_tax_id"]
