from reco_ltr.ranking.feature_normalizer import FeatureNormalizerSet, NormalizationResult, RequestNormalizers

__all__ = [
    'FeatureNormalizerSet',
    'NormalizationResult',
    'RequestNormalizers',
]
