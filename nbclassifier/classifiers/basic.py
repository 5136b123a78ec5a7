# basic.py - a basic naive Bayes classifier for sentences
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""An implementation of a naive Bayes-like classifier over any number of
categories.

Paul Graham's original description of combining word probabilities:

    http://www.paulgraham.com/naivebayes.html

The classifier is used in three phases, always in this order:

1. :meth:`Classifier.train` is called once for each labeled sentence. It
   only counts: how many sentences were given for each category, and how
   many times each word was seen with each category.

2. :meth:`Classifier.probabilities` is called once, after all training.
   For each (word, category) pair it computes the share of that category's
   sentences in which the word appeared (the word's frequency), and then
   the word's frequency in that category relative to its frequency summed
   over all categories. That ratio, clamped into [0.01, 0.99], is the
   probability that a sentence containing the word belongs to the
   category.

3. :meth:`Classifier.guess` multiplies, for each category, the
   probabilities of the known words in a sentence and normalizes the
   products so that they sum to one.

This is not textbook naive Bayes: there is no category prior and no
evidence term, and the frequencies are document frequencies approximated by
raw occurrence counts.

"""
import logging
import math

from nbclassifier.classifiers.constants import MAX_PROBABILITY
from nbclassifier.classifiers.constants import MIN_PROBABILITY
from nbclassifier.classifiers.constants import PROBABILITY_KEY
from nbclassifier.classifiers.constants import UNKNOWN_WORD_PROB
from nbclassifier.tokenizer import tokenize


class ClassifierError(Exception):
    """Base class for errors raised by a :class:`Classifier`."""


class ProbabilitiesNotComputedError(ClassifierError):
    """Raised when guessing with probabilities that were never computed, or
    that were made stale by training after they were computed.

    """

    def __str__(self):
        return ('word probabilities are not up to date; call probabilities()'
                ' after training and before guessing')


class UndefinedProbabilityError(ClassifierError):
    """Raised when a word probability would require dividing by zero.

    `word` is the word whose probability is undefined.

    """

    def __init__(self, word):
        ClassifierError.__init__(self, word)
        self.word = word

    def __str__(self):
        return 'word {!r} has zero frequency in every category'.format(
            self.word)


class Category(object):
    """Represents the training counts of a single category.

    `doc_count` is the number of trained sentences labeled with this
    category. `word_count` is the number of valid tokens in those sentences,
    counting every occurrence.

    """

    __slots__ = 'name', 'doc_count', 'word_count'

    def __init__(self, name, doc_count=1, word_count=0):
        self.name = name
        self.doc_count = doc_count
        self.word_count = word_count

    def __repr__(self):
        return 'Category({!r}, doc_count={!r}, word_count={!r})'.format(
            self.name, self.doc_count, self.word_count)


class WordStat(object):
    """The statistics of one word within one category.

    `seen` is the number of times the word occurred in sentences trained
    with the category. `frequency` and `probability` are ``None`` until
    :meth:`Classifier.probabilities` computes them.

    .. note::

       There is one of these for every (word, category) pair once the
       probabilities are computed, so ``__slots__`` is used to conserve
       memory.

    """

    __slots__ = 'seen', 'frequency', 'probability'

    def __init__(self, seen=0):
        self.seen = seen
        self.frequency = None
        self.probability = None

    def __repr__(self):
        return 'WordStat(seen={!r}, frequency={!r}, probability={!r})'.format(
            self.seen, self.frequency, self.probability)


class WordInfo(object):
    """Represents a distinct word and its statistics in each category.

    `stats` maps category name to :class:`WordStat`. During training it only
    holds the categories the word was seen with; after the probabilities are
    computed it holds every known category.

    """

    __slots__ = 'word', 'stats'

    def __init__(self, word):
        self.word = word
        self.stats = {}

    def __repr__(self):
        return 'WordInfo({!r}, {!r})'.format(self.word, self.stats)

    def probabilities(self):
        """Returns a new dictionary mapping category name to this word's
        probability for that category.

        """
        return {name: stat.probability for name, stat in self.stats.items()}


class Classifier:
    """Learns from labeled sentences and guesses the category of new ones.

    `unknown_word_prob` is the factor a word never seen during training
    contributes to every category when guessing. If it is ``None``, unknown
    words are ignored. Otherwise it must be in the interval (0, 1], or
    :exc:`ValueError` is raised.

    Each instance owns its own vocabulary and category tables. Instances are
    not safe to train from multiple threads at once.

    """

    # allow a subclass to use a different class for WordInfo
    WordInfoClass = WordInfo

    def __init__(self, unknown_word_prob=UNKNOWN_WORD_PROB):
        if unknown_word_prob is not None and not 0 < unknown_word_prob <= 1:
            raise ValueError('unknown_word_prob must be in (0, 1], not'
                             ' {!r}'.format(unknown_word_prob))
        self.unknown_word_prob = unknown_word_prob
        # Both of these preserve insertion order, which is the order in
        # which categories are reported by guess().
        self.wordinfo = {}
        self.categories = {}
        # True only while the word probabilities reflect all training.
        self._computed = False

    @property
    def ready(self):
        """Whether :meth:`guess` may be called."""
        return self._computed

    def train(self, text, category):
        """Teach the classifier that the sentence `text` belongs to
        `category`.

        Every valid token of `text` is counted once per occurrence. Text with
        no valid tokens still counts as a sentence of `category`.

        If this is called after :meth:`probabilities`, the probabilities
        become stale and :meth:`probabilities` must be called again before
        the next :meth:`guess`.

        """
        # Tokenize first so that a bad argument changes nothing.
        words = list(tokenize(text))
        if self._computed:
            logging.warning('training %r after probabilities were computed;'
                            ' they must be computed again', category)
            self._computed = False
        record = self._category_memoize(category)
        for word in words:
            record.word_count += 1
            info = self._wordinfoget(word)
            if info is None:
                info = self.WordInfoClass(word)
                self._wordinfoset(word, info)
            stat = info.stats.get(category)
            if stat is None:
                info.stats[category] = WordStat(seen=1)
            else:
                stat.seen += 1

    def train_many(self, pairs):
        """Trains on each ``(text, category)`` pair in the iterable
        `pairs`.

        """
        for text, category in pairs:
            self.train(text, category)

    def _category_memoize(self, name):
        record = self.categories.get(name)
        if record is None:
            record = self.categories[name] = Category(name)
        else:
            record.doc_count += 1
        return record

    def probabilities(self):
        """Computes the probability of every known word for every known
        category.

        This must be called after all training and before any guess. Calling
        it again without training in between gives identical results.

        If some word has zero frequency in every category,
        :exc:`UndefinedProbabilityError` is raised.

        """
        self._generate_frequencies()
        self._generate_probabilities()
        self._computed = True
        logging.debug('computed probabilities for %d words in %d categories',
                      len(self.wordinfo), len(self.categories))

    def _generate_frequencies(self):
        # This also fills in a zero stat for every category the word was
        # never trained with, so that the second pass sees a full matrix.
        for info in self.wordinfo.values():
            for name, category in self.categories.items():
                stat = info.stats.get(name)
                if stat is None:
                    stat = info.stats[name] = WordStat()
                stat.frequency = stat.seen / category.doc_count

    def _generate_probabilities(self):
        for info in self.wordinfo.values():
            total = sum(stat.frequency for stat in info.stats.values()
                        if stat.frequency)
            if not total:
                raise UndefinedProbabilityError(info.word)
            for name in self.categories:
                stat = info.stats[name]
                prob = stat.frequency / total
                stat.probability = max(MIN_PROBABILITY,
                                       min(MAX_PROBABILITY, prob))

    def guess(self, text, evidence=False):
        """Returns the probability that `text` belongs to each category.

        The return value is a dictionary mapping each known category name to
        a dictionary of the form ``{'probability': p}``. The probabilities
        sum to one. Words never seen during training are ignored (unless
        `unknown_word_prob` was given), so a sentence with no known words
        gets the same probability for every category.

        If `evidence` is ``True``, the return value is a pair in which the
        first element is the dictionary described above and the second
        element is a list of ``(word, probabilities)`` pairs, one for each
        word of `text` that was scored, in order, where ``probabilities``
        maps category name to that word's probability.

        If :meth:`probabilities` has not been called since the last training,
        :exc:`ProbabilitiesNotComputedError` is raised.

        """
        if not self._computed:
            raise ProbabilitiesNotComputedError()
        clues = self._getclues(tokenize(text))

        # The product of many small probabilities underflows quickly, so sum
        # the logarithms instead. Exponentiating relative to the largest sum
        # keeps the biggest term at exactly one, which gives the same ratios
        # as dividing the raw products by their total. The total is then at
        # least one.
        logs = dict.fromkeys(self.categories, 0.0)
        for word, probs in clues:
            for name in logs:
                logs[name] += math.log(probs[name])
        results = {}
        if logs:
            peak = max(logs.values())
            scaled = {name: math.exp(value - peak)
                      for name, value in logs.items()}
            total = sum(scaled.values())
            for name, value in scaled.items():
                results[name] = {PROBABILITY_KEY: value / total}

        if evidence:
            return results, clues
        return results

    def best_guess(self, text):
        """Returns a pair ``(category, probability)`` naming the most
        probable category for `text`.

        Ties go to the category that was trained first. If no category is
        known, ``(None, 0.0)`` is returned.

        """
        results = self.guess(text)
        if not results:
            return None, 0.0
        name = max(results, key=lambda n: results[n][PROBABILITY_KEY])
        return name, results[name][PROBABILITY_KEY]

    def _getclues(self, wordstream):
        """Return a list of ``(word, probabilities)`` pairs for the words of
        `wordstream` that take part in scoring.

        Duplicates are kept: a word occurring twice contributes twice.

        """
        clues = []
        for word in wordstream:
            info = self._wordinfoget(word)
            if info is not None:
                clues.append((word, info.probabilities()))
            elif self.unknown_word_prob is not None:
                clues.append((word, dict.fromkeys(self.categories,
                                                  self.unknown_word_prob)))
        return clues

    def _wordinfoget(self, word):
        return self.wordinfo.get(word)

    def _wordinfoset(self, word, record):
        self.wordinfo[word] = record
