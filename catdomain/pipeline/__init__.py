"""
Pipeline module: vocabulary construction over counting registries.
"""

from catdomain.pipeline.vocabulary import VocabularyResult, build_vocabulary

__all__ = [
    "VocabularyResult",
    "build_vocabulary",
]
