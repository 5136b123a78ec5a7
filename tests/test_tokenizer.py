# test_tokenizer.py - unit tests for the nbclassifier.tokenizer module
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
import pytest

from nbclassifier.tokenizer import is_valid_token
from nbclassifier.tokenizer import tokenize


def test_tokenize_punctuation():
    assert list(tokenize('Hello, World!!')) == ['hello', 'world']


def test_tokenize_only_punctuation():
    assert list(tokenize('!!!')) == []


def test_tokenize_empty():
    assert list(tokenize('')) == []


def test_tokenize_lowercases():
    assert list(tokenize('HAPPY Happy happy')) == ['happy'] * 3


def test_tokenize_keeps_digits_and_underscores():
    assert list(tokenize('route_66 -- 42')) == ['route_66', '42']


def test_tokenize_keeps_duplicates_in_order():
    assert list(tokenize('a b a')) == ['a', 'b', 'a']


def test_tokenize_apostrophe_splits():
    assert list(tokenize("don't")) == ['don', 't']


def test_tokenize_not_a_string():
    with pytest.raises(TypeError):
        list(tokenize(None))
    with pytest.raises(TypeError):
        list(tokenize(b'bytes'))


def test_is_valid_token():
    assert is_valid_token('a')
    assert is_valid_token('_')
    assert is_valid_token('7')
    assert not is_valid_token('')
    assert not is_valid_token('?!')
    assert not is_valid_token(' ')


def test_tokenize_non_ascii():
    assert list(tokenize('café naïve')) == ['caf', 'na', 've']
    assert list(tokenize('ñ ü')) == []
    # a decomposed accent splits like any other non-word character
    assert list(tokenize('cafe\u0301 au lait')) == ['cafe', 'au', 'lait']


def test_is_valid_token_non_ascii():
    assert not is_valid_token('é')
    assert is_valid_token('é1')
