class TokenizationError(Exception):
    """
    The scanner will throw a TokenizationError if a captured slice
    of the input can not be decoded as UTF-8. This is the only
    condition that stops tokenization.
    """

    pass
