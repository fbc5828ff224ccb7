import copy


def default_or_raise(default_value, message=None):
    """
    Service function for lookup accessors, that either return a fallback value or raise on a miss.

    If default_value is an exception instance, it is raised; a message, if given, is attached to
    a copy of the exception, so the caller's instance can be passed as a default again and again.
    Any other default_value is returned unchanged.

    Parameters:
    default_value (any): The fallback value, or an exception instance to raise.
    message (str, optional): Context to attach to a raised exception. Defaults to None.

    Returns:
    any: default_value, if it is not an exception.

    Raises:
    Exception: default_value (or its annotated copy), if it is an exception instance.
    """
    if not isinstance(default_value, Exception):
        return default_value

    if not message:
        raise default_value

    exception = copy.copy(default_value)
    args = default_value.args
    if args and isinstance(args[0], str):
        exception.args = (f"{args[0]} | {message}",) + args[1:]
    else:
        exception.args = (message,) + args
    raise exception
