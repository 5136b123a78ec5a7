# trainers.py - objects which learn from corpora
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""
    Trainer is a concrete class that observes one or more Corpus objects
    and trains a Classifier with each sentence added to them, using the
    category attached to the sentence.

    The trainer only counts. Once all the training data has been added,
    call probabilities() on the classifier before guessing.

"""
import logging

from nbclassifier.corpora import sentence_added


class Trainer(object):
    """Associates a Classifier object and one or more Corpora.

    `classifier` is an instance of :class:`Classifier` on which sentences
    added to the corpora will be trained.

    `corpora` is an iterable of :class:`Corpus` objects to which this
    trainer will listen. When a sentence is added to any of these corpora,
    the :meth:`train` method will be called. (The :meth:`train` method is
    connected to the :data:`sentence_added` signal.)

    Sentences already in the corpora are not trained; use
    :meth:`train_corpus` for those.

    The signal keeps a strong reference to the trainer, so it goes on
    training until :meth:`disconnect` is called, whether or not the caller
    holds on to it.

    """

    def __init__(self, classifier, corpora=()):
        self.classifier = classifier
        self.corpora = list(corpora)
        for corpus in self.corpora:
            sentence_added.connect(self.train, sender=corpus, weak=False)

    def train(self, sender, sentence):
        """Train the classifier with the specified sentence.

        `sender` is the :class:`Corpus` object to which the sentence was
        added.

        `sentence` is an instance of :class:`LabeledSentence`.

        """
        logging.debug('training with %s as %r', sentence.key,
                      sentence.category)
        self.classifier.train(sentence.text, sentence.category)

    def train_corpus(self, corpus):
        """Train all the sentences in the specified corpus."""
        for sentence in corpus.values():
            self.train(corpus, sentence)

    def disconnect(self):
        """Stop listening to the corpora."""
        for corpus in self.corpora:
            sentence_added.disconnect(self.train, sender=corpus)
        self.corpora = []
