class BrandReviewError(Exception):
    """Base class for errors raised by the review engine."""


class RuleLoadError(BrandReviewError):
    """Rule source is malformed or could not be fetched."""


class NotLoadedError(BrandReviewError):
    """Evaluation attempted before a rule set was loaded."""


class EmptyContentError(BrandReviewError, ValueError):
    """Analysis attempted on blank content."""


class FormatError(BrandReviewError, ValueError):
    """Encoded analysis does not match the expected format."""


class NoAnalysisError(BrandReviewError, LookupError):
    """No analysis is available to export."""
