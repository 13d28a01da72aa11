from apnea_screen.classification.classifier import Classifier
from apnea_screen.classification.client_base import BaseClassificationClient
from apnea_screen.classification.factory import ClassificationClientFactory

__all__ = ["BaseClassificationClient", "Classifier", "ClassificationClientFactory"]
