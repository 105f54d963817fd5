from .local_classifier import LocalClassifier, detect_contraindications, assess_legal_validity

__all__ = ['LocalClassifier', 'detect_contraindications', 'assess_legal_validity']
