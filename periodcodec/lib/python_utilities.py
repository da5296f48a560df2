def to_normal_str(text):
    """
    Make sure we return a normal string, no matter if we were given
    a str or utf-8 encoded bytes.  Line endings are normalized.
    """
    if text is None:
        return text
    if not isinstance(text, str):
        text = text.decode("utf-8")
    text = text.replace("\r\n", "\n")
    return text


def to_unicode(text):
    if text and isinstance(text, bytes):
        return text.decode("utf-8")
    return text
