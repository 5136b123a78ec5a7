# tokenizer.py - splits sentences into tokens for later statistical analysis
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""Module to tokenize sentences for classification.

Both training and guessing go through :func:`tokenize`, so a word is
always looked up in the same form in which it was stored.

"""
import re

#: Splits text on runs of non-word characters. A "word character" is an
#: ASCII letter, digit or underscore; any other character separates tokens.
SPLIT_RE = re.compile(r'\W+', re.ASCII)

#: Matches any token containing at least one word character.
VALID_TOKEN_RE = re.compile(r'\w', re.ASCII)


def is_valid_token(token):
    """Returns ``True`` if and only if `token` contains at least one word
    character.

    The empty string and pure punctuation are not valid tokens.

    """
    return VALID_TOKEN_RE.search(token) is not None


def tokenize(text):
    """Generates the lower-cased valid tokens of `text`.

    Splitting on non-word characters yields empty strings at the
    boundaries of `text`; those, like any other invalid token, are
    skipped.

    If `text` is not a string, :exc:`TypeError` is raised.

    """
    if not isinstance(text, str):
        raise TypeError('text must be a string, not {}'.format(
            type(text).__name__))
    for token in SPLIT_RE.split(text):
        if is_valid_token(token):
            yield token.lower()
