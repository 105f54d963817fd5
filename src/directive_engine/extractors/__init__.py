from .signal_extractor import (
    SignalExtractor,
    SignalExtractionResult,
    DirectiveSignal,
    keyword_confidence,
    confidence_boost,
)

__all__ = [
    'SignalExtractor',
    'SignalExtractionResult',
    'DirectiveSignal',
    'keyword_confidence',
    'confidence_boost',
]
