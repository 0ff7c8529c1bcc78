from .margin_disambiguator import MarginDisambiguator

__all__ = ["MarginDisambiguator"]
