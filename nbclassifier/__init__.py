# __init__.py - indicates that this directory is a Python package
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
from .classifiers import Category
from .classifiers import Classifier
from .classifiers import ClassifierError
from .classifiers import ProbabilitiesNotComputedError
from .classifiers import UndefinedProbabilityError
from .classifiers import WordInfo
from .classifiers import WordStat
from .corpora import Corpus
from .corpora import LabeledSentence
from .corpora import sentence_added
from .tokenizer import tokenize
from .trainers import Trainer
