# base.py - classes for a corpus of labeled sentences
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""Corpus management for labeled training sentences.

A corpus is a collection of :class:`LabeledSentence` objects keyed by an
identifier. It is iterable and observable: whenever a sentence is added,
the :data:`sentence_added` signal is sent, which is how a
:class:`~nbclassifier.trainers.Trainer` learns about new training data.

Sentences are never removed from a corpus; a classifier cannot forget what
it was trained on.

"""
import itertools
import logging

from blinker import signal

#: A signal that is emitted when a sentence is added to a corpus.
#:
#: Subscribers to this signal receive the corpus object that emitted the
#: signal, along with a ``sentence`` keyword argument, whose value contains
#: the sentence that was added.
sentence_added = signal('sentence-added')


class LabeledSentence(object):
    """A piece of training text together with its category.

    `key` identifies the sentence within a corpus. If it is ``None``, the
    corpus assigns one when the sentence is added.

    """

    __slots__ = 'text', 'category', 'key'

    def __init__(self, text, category, key=None):
        self.text = text
        self.category = category
        self.key = key

    def __repr__(self):
        return 'LabeledSentence({!r}, {!r}, key={!r})'.format(
            self.text, self.category, self.key)


class Corpus:
    """A dictionary of :class:`LabeledSentence` objects.

    When sentences are added via :meth:`add_sentence`, the
    ``sentence_added`` signal is emitted. To connect a function to this
    signal, use code like the following::

        from nbclassifier import sentence_added

        @sentence_added.connect
        def on_sentence_added(corpus, sentence):
            print('Sentence {} was added to corpus {}'.format(sentence,
                                                              corpus))

    `name` is only used in log messages and in the representation of the
    corpus.

    """

    def __init__(self, name=None):
        self.name = name
        self.sentences = {}
        self._keys = itertools.count()

    def add_sentence(self, sentence, sentence_id=None, emit_signal=True):
        """Adds the specified sentence to this corpus.

        The sentence is stored under `sentence_id` if given, else under the
        sentence's own key; if both are ``None`` a new integer key is
        assigned to the sentence. If the key is already taken,
        :exc:`KeyError` is raised and nothing is stored or trained.

        If `emit_signal` is ``True``, the :data:`sentence_added` signal is
        emitted.

        """
        key = sentence.key if sentence_id is None else sentence_id
        if key is None:
            key = next(self._keys)
            while key in self.sentences:
                key = next(self._keys)
        elif key in self.sentences:
            raise KeyError('corpus {!r} already has a sentence with key'
                           ' {!r}'.format(self.name, key))
        sentence.key = key
        logging.debug('adding sentence %s to corpus %s', key, self.name)
        self.sentences[key] = sentence
        if emit_signal:
            sentence_added.send(self, sentence=sentence)
        return key

    def add(self, text, category):
        """Convenience method that wraps `text` and `category` in a
        :class:`LabeledSentence` and adds it, returning its key.

        """
        return self.add_sentence(LabeledSentence(text, category))

    def get(self, key, default=None):
        return self.sentences.get(key, default)

    def __getitem__(self, key):
        return self.sentences[key]

    def keys(self):
        return self.sentences.keys()

    def values(self):
        return self.sentences.values()

    def items(self):
        return self.sentences.items()

    def __contains__(self, key):
        return key in self.sentences

    def __len__(self):
        return len(self.sentences)

    def __iter__(self):
        return iter(self.sentences)

    def __repr__(self):
        return '<Corpus {!r} with {} sentences>'.format(self.name,
                                                      len(self.sentences))
