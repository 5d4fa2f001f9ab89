"""Success/failure value selection."""


def select_value(on_success: str, on_failure: str, success: bool) -> str:
    """Pick the value that applies to the run outcome.

    An empty *on_failure* means the fallback was not configured, so
    *on_success* is used even when the run failed.

    Args:
        on_success: Primary value.
        on_failure: Value for failed runs.
        success: Whether the run succeeded.
    """
    if success or on_failure == "":
        return on_success
    return on_failure
