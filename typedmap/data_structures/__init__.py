# data_structures/__init__.py

from .frozen_map import FrozenMap
from .hashable_ordered_set import HashableOrderedSet
from .ordered_map import OrderedMap
