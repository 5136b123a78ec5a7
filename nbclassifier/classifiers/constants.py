# constants.py - constant variables used in multiple modules
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.

#: Word probabilities are clamped into the interval [MIN_PROBABILITY,
#: MAX_PROBABILITY]. No single word can then make a category certain or
#: impossible, and a product of word probabilities never collapses to zero
#: because one word was never seen with a category.
MIN_PROBABILITY = 0.01
MAX_PROBABILITY = 0.99

#: The factor contributed to every category by a token that was never seen
#: during training. ``None`` drops unknown tokens entirely, so they give no
#: evidence either way. The same factor applies to every category, so any
#: value in (0, 1] leaves the normalized result unchanged; unknown words then
#: only show up in the evidence returned by a guess.
UNKNOWN_WORD_PROB = None

#: The key under which each category's score is reported by
#: :meth:`Classifier.guess`.
PROBABILITY_KEY = 'probability'
