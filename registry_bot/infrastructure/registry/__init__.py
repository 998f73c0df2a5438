from .vbank_provider import VBankRegistryProvider

__all__ = ["VBankRegistryProvider"]
