"""Custom warning category for flagbind."""


class FlagbindWarning(UserWarning):
    """Warning category for non-fatal problems in binding tables, such as a field
    name that appears more than once.

    Filter it like any other warning:
    >>> import warnings
    >>> warnings.filterwarnings("ignore", category=FlagbindWarning)
    """
