"""Template update strategy types."""

from enum import StrEnum


class UpdateStrategy(StrEnum):
    """How a finished workout is folded back into its template.

    This is a closed set; there is no fifth strategy.
    """

    VALUES_ONLY = "values_only"
    TEMPLATE_AND_VALUES = "template_and_values"
    SAVE_AS_NEW = "save_as_new"
    KEEP_ORIGINAL = "keep_original"
