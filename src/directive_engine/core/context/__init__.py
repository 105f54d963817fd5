from .enums import ProcessingTier
from .extracted_directive import ExtractedDirective
from .analysis import DirectiveAnalysis, EscalationFailure

__all__ = [
    'ProcessingTier',
    'ExtractedDirective',
    'DirectiveAnalysis',
    'EscalationFailure',
]
