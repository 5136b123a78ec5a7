# __init__.py - indicates that this directory is a Python package
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
from .basic import Category
from .basic import Classifier
from .basic import ClassifierError
from .basic import ProbabilitiesNotComputedError
from .basic import UndefinedProbabilityError
from .basic import WordInfo
from .basic import WordStat
