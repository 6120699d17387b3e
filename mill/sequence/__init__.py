from .concat import concat, distinct_values
from .nonnull import mapped_non_null, non_null
from .setops import difference, intersection

__all__ = (
    "concat",
    "difference",
    "distinct_values",
    "intersection",
    "mapped_non_null",
    "non_null",
)
